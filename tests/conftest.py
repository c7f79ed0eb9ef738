# Ensures project root is importable for tests (so 'data', 'services', etc. can be imported)
# and provides a couple of ready-made assignments.
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models.assignment import Assignment, Partition


def make_assignment(cube_name: str, **extra) -> Assignment:
    return Assignment(
        cube_name=cube_name,
        assignments={
            1: [Partition(partition_id=0, partition_info="topic-a"), Partition(partition_id=2)],
            2: [Partition(partition_id=1, partition_info="topic-a")],
        },
        **extra,
    )


@pytest.fixture
def sales_and_web():
    return [make_assignment("sales_cube"), make_assignment("web_cube")]
