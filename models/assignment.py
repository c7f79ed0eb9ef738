from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator
from typing import Dict, List, Optional


def check_cube_name(name: str) -> str:
    """Cube names become file names: no separators, no '.' / '..'."""
    if "/" in name or "\\" in name or "\x00" in name or name in (".", ".."):
        raise ValueError(f"cube name not usable as a file name: {name!r}")
    return name


class Partition(BaseModel):
    """One topic partition consumed by a replica set."""
    model_config = ConfigDict(extra="allow")

    partition_id: StrictInt
    partition_info: Optional[StrictStr] = None


class Assignment(BaseModel):
    """Binding of one cube to the replica sets that consume its stream data.

    ``assignments`` maps replica set id -> partitions. Fields the store adds
    beyond these are kept as extras so a backup restores exactly what was read.
    """
    model_config = ConfigDict(extra="allow")

    cube_name: StrictStr = Field(min_length=1)
    assignments: Dict[int, List[Partition]] = Field(default_factory=dict)

    @field_validator("cube_name")
    @classmethod
    def _cube_name_is_file_name(cls, v: str) -> str:
        return check_cube_name(v)

    @property
    def replica_set_ids(self) -> List[int]:
        return sorted(self.assignments)

    def partitions_for(self, replica_set_id: int) -> List[Partition]:
        return list(self.assignments.get(replica_set_id, []))

    def partition_replica_set_map(self) -> Dict[int, int]:
        out: Dict[int, int] = {}
        for rs_id, partitions in self.assignments.items():
            for p in partitions:
                out[p.partition_id] = rs_id
        return out
