import io
import pytest
from rich.console import Console
from termistat.config.collection_config import CollectionConfig
from termistat.config.config import Config


MEMINFO = """MemTotal:        8000000 kB
MemFree:          500000 kB
MemAvailable:    2000000 kB
Buffers:          100000 kB
"""

NET_DEV = """Inter-|   Receive                                                |  Transmit
 face |bytes    packets errs drop fifo frame compressed multicast|bytes    packets errs drop fifo colls carrier compressed
    lo:  204800     100    0    0    0     0          0         0   204800     100    0    0    0     0       0          0
  eth0: 1048576    2000    0    0    0     0          0         0    51200     300    0    0    0     0       0          0
"""


def write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


@pytest.fixture
def fake_root(tmp_path):
    """A /proc and /sys lookalike under tmp_path."""
    proc = tmp_path / "proc"
    sys_ = tmp_path / "sys"
    proc.mkdir()
    sys_.mkdir()
    return proc, sys_


@pytest.fixture
def config(fake_root):
    proc, sys_ = fake_root
    return Config(collection=CollectionConfig(
        proc_root=str(proc), sys_root=str(sys_), wifi_command=[]
    ))


@pytest.fixture
def console():
    return Console(file=io.StringIO(), color_system=None, width=200, markup=False)
