import pytest

from zyfetch import config

CPUINFO = """processor\t: 0
vendor_id\t: AuthenticAMD
cpu family\t: 25
model name\t: AMD Ryzen 7 5800X 8-Core Processor
cpu MHz\t\t: 3800.000
"""

MEMINFO = """MemTotal:       16777216 kB
MemFree:         8388608 kB
MemAvailable:   12582912 kB
"""

OS_RELEASE = """NAME="Arch Linux"
PRETTY_NAME="Arch Linux"
ID=arch
"""


@pytest.fixture(autouse=True)
def audit_dir(tmp_path, monkeypatch):
    """Keep audit entries out of the real home directory."""
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(config, "LOG_DIR", log_dir)
    return log_dir


@pytest.fixture
def host_files(tmp_path):
    """Fake /etc and /proc sources, keyed by field name."""
    files = {
        "os": OS_RELEASE,
        "host": "archbox\n",
        "kernel": "Linux version 6.9.7-arch1-1 (linux@archlinux) (gcc (GCC) 14.1.1) #1 SMP PREEMPT_DYNAMIC\n",
        "uptime": "90065.42 350000.10\n",
        "cpu": CPUINFO,
        "memory": MEMINFO,
    }
    paths = {}
    for name, content in files.items():
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        paths[name] = path
    return paths
