"""バレエのポジション（ポーズ）に関するデータの定義"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

# 遷移パラメータのうち必須のもの
REQUIRED_FIELDS = ("dist", "turnout", "front")
# 拡張パラメータ（None の場合は「存在しない」扱い）
OPTIONAL_FIELDS = ("arm_lift", "elbow_bend", "knee_bend")


@dataclass
class PoseParams:
    """A pose's scalar parameters.

    attributes:
            dist: stance half-width scale (>= 0, not clamped)
            turnout: hip rotation magnitude in degrees
            front: signed front/back foot offset
            arm_lift: extra arm lift in degrees on top of the 20 degree base
            elbow_bend: elbow bend in degrees (mirrored left/right)
            knee_bend: knee bend in degrees (same sign on both knees)
    """

    dist: float
    turnout: float
    front: float
    arm_lift: Optional[float] = None
    elbow_bend: Optional[float] = None
    knee_bend: Optional[float] = None

    def fields_present(self) -> List[str]:
        """Names of the fields that carry a value, in declaration order."""

        return [f.name for f in fields(self) if getattr(self, f.name) is not None]

    def as_dict(self) -> Dict[str, float]:
        return {name: float(getattr(self, name)) for name in self.fields_present()}

    def copy(self) -> "PoseParams":
        return PoseParams(**{f.name: getattr(self, f.name) for f in fields(self)})


@dataclass(frozen=True)
class Pose:
    """A named target configuration.

    `fixed_crossed_stance` marks poses whose leg anchors are hand-authored
    (feet crossed) instead of derived from `dist`/`front`.
    """

    id: int
    name: str
    desc: str
    params: PoseParams
    fixed_crossed_stance: bool = False


class PoseTable:
    """Read-only mapping from pose id to :class:`Pose`."""

    def __init__(self, poses: Iterable[Pose]) -> None:
        table: Dict[int, Pose] = {}
        for pose in poses:
            if isinstance(pose.id, bool) or not isinstance(pose.id, int):
                raise ValueError(f"pose id must be an integer: {pose.id!r}")
            if pose.id in table:
                raise ValueError(f"duplicate pose id: {pose.id}")
            if not pose.name:
                raise ValueError(f"pose {pose.id} has an empty name")
            table[pose.id] = pose
        self._poses: Mapping[int, Pose] = table

    def get(self, pose_id: object) -> Optional[Pose]:
        """Return the pose for `pose_id`, or None when there is none."""

        if isinstance(pose_id, bool) or not isinstance(pose_id, int):
            return None
        return self._poses.get(pose_id)

    def ids(self) -> List[int]:
        return sorted(self._poses)

    def __contains__(self, pose_id: object) -> bool:
        return self.get(pose_id) is not None

    def __iter__(self) -> Iterator[Pose]:
        return (self._poses[i] for i in self.ids())

    def __len__(self) -> int:
        return len(self._poses)


# クラシックバレエの足の 6 ポジション
# arm_lift = 5 + (II: 6, V: 14, その他: 0) で元の腕の角度 (25 + lift) を再現する
POSES = (
    Pose(
        id=1,
        name="I",
        desc="Heels together, turnout.",
        params=PoseParams(dist=0.0, turnout=45, front=0.0, arm_lift=5.0),
    ),
    Pose(
        id=2,
        name="II",
        desc="Feet apart, turnout.",
        params=PoseParams(dist=1.0, turnout=45, front=0.0, arm_lift=11.0),
    ),
    Pose(
        id=3,
        name="III",
        desc="One foot in front (near).",
        params=PoseParams(dist=0.1, turnout=45, front=0.6, arm_lift=5.0),
    ),
    Pose(
        id=4,
        name="IV",
        desc="One foot in front (apart).",
        params=PoseParams(dist=0.4, turnout=45, front=0.9, arm_lift=5.0),
    ),
    Pose(
        id=5,
        name="V",
        desc="Feet crossed tightly.",
        params=PoseParams(dist=0.0, turnout=55, front=0.8, arm_lift=19.0),
        fixed_crossed_stance=True,
    ),
    Pose(
        id=6,
        name="VI",
        desc="Parallel feet.",
        params=PoseParams(dist=0.3, turnout=0, front=0.0, arm_lift=5.0),
    ),
)

DEFAULT_POSE_TABLE = PoseTable(POSES)
