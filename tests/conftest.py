"""
Shared pytest fixtures for zfsmon tests.

Provides a controllable clock, scripted command/file capabilities and
fixture text so collection can be tested without ZFS installed.
"""

from typing import Dict, List, Optional, Sequence, Tuple, Union

import pytest

from zfsmon.constants import ARCSTATS_PATH
from zfsmon.errors import CommandError, FilesystemError
from zfsmon.system import CommandExecutor, FilesystemReader


# =============================================================================
# Clock
# =============================================================================

class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# Capabilities
# =============================================================================

class ScriptedExecutor(CommandExecutor):
    """
    Command executor driven by a response table.

    Values may be output text or an exception instance to raise. Every
    call is recorded as (command, args, timeout).
    """

    def __init__(self, responses: Optional[Dict[Tuple[str, ...], Union[str, Exception]]] = None):
        self.responses = dict(responses or {})
        self.calls: List[Tuple[str, Tuple[str, ...], Optional[float]]] = []

    def run(self, command: str, args: Sequence[str], timeout: Optional[float] = None) -> str:
        self.calls.append((command, tuple(args), timeout))
        response = self.responses.get((command, *args))
        if response is None:
            raise CommandError(command, args, "not scripted")
        if isinstance(response, Exception):
            raise response
        return response

    def count(self, command: str, *args: str) -> int:
        return sum(1 for c, a, _ in self.calls if (c, a) == (command, args))


class DictReader(FilesystemReader):
    """Filesystem reader backed by a dict of path -> content."""

    def __init__(self, files: Optional[Dict[str, str]] = None):
        self.files = dict(files or {})

    def read(self, path: str) -> str:
        if path not in self.files:
            raise FilesystemError(path, "read", "No such file or directory")
        return self.files[path]


@pytest.fixture
def executor() -> ScriptedExecutor:
    return ScriptedExecutor()


@pytest.fixture
def reader() -> DictReader:
    return DictReader()


# =============================================================================
# Fixture text
# =============================================================================

def make_arcstats(**counters: object) -> str:
    """Build an arcstats dump with a kstat header and the given counters."""
    lines = [
        "13 1 0x01 147 39984 4312578125 291847261873829",
        "name                            type data",
    ]
    for name, value in counters.items():
        lines.append(f"{name:<32}4    {value}")
    return "\n".join(lines) + "\n"


@pytest.fixture
def arcstats_text() -> str:
    return make_arcstats(
        hits=900,
        misses=100,
        size=49720066048,
        c_max=49910562816,
        read_ops=1247,
    )


@pytest.fixture
def arcstats_l2_text() -> str:
    return make_arcstats(
        hits=900,
        misses=100,
        size=49720066048,
        c_max=49910562816,
        read_ops=1247,
        l2_hits=750,
        l2_misses=250,
        l2_size=479961088000,
        l2_read_bytes=1048576,
    )


ZPOOL_STATUS_WITH_LOGS = """\
  pool: testpool
 state: ONLINE
config:

\tNAME        STATE     READ WRITE CKSUM
\ttestpool    ONLINE       0     0     0
\t  raidz1-0  ONLINE       0     0     0
\t    sda     ONLINE       0     0     0
\t    sdb     ONLINE       0     0     0
\tlogs
\t  mirror-1  ONLINE       0     0     0
\t    sdc     ONLINE       0     0     0
\t    sdd     ONLINE       0     0     0

errors: No known data errors
"""

ZPOOL_STATUS_NO_LOGS = """\
  pool: testpool
 state: ONLINE
config:

\tNAME        STATE     READ WRITE CKSUM
\ttestpool    ONLINE       0     0     0
\t  raidz1-0  ONLINE       0     0     0

errors: No known data errors
"""


def make_iostat(write_ops: object = 23, write_bw: str = "12.0M") -> str:
    return (
        "                              capacity     operations     bandwidth\n"
        "pool                       alloc   free   read  write   read  write\n"
        "--------------------------  -----  -----  -----  -----  -----  -----\n"
        f"testpool                   1.23T  2.34T      0     {write_ops}      0  {write_bw}\n"
        f"  mirror-1                     -      -      0     {write_ops}      0  {write_bw}\n"
        f"    sdc                         -      -      0     {write_ops}      0  {write_bw}\n"
        "--------------------------  -----  -----  -----  -----  -----  -----\n"
    )


@pytest.fixture
def zpool_status_with_logs() -> str:
    return ZPOOL_STATUS_WITH_LOGS


@pytest.fixture
def zpool_status_no_logs() -> str:
    return ZPOOL_STATUS_NO_LOGS


@pytest.fixture
def arcstats_path() -> str:
    return ARCSTATS_PATH


@pytest.fixture
def arcstats_factory():
    """Return the arcstats builder: arcstats_factory(hits=1, ...)."""
    return make_arcstats


@pytest.fixture
def iostat_factory():
    """Return the iostat builder: iostat_factory(write_ops, write_bw)."""
    return make_iostat
