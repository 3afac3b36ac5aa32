"""
Static configuration for zyfetch.

Source files, command whitelist and output strings live here. Collectors
read these values when called, so patching them redirects the defaults.
"""

import os
from pathlib import Path

# Host sources
OS_RELEASE = "/etc/os-release"
HOSTNAME = "/etc/hostname"
PROC_VERSION = "/proc/version"
PROC_UPTIME = "/proc/uptime"
PROC_CPUINFO = "/proc/cpuinfo"
PROC_MEMINFO = "/proc/meminfo"
DISK_MOUNT = "/"

# GPU vendor lookup
GPU_COMMAND = ["sh", "-c", "lspci | grep VGA"]
# ZYFETCH_GPU_TIMEOUT overrides this, read when the lookup runs
GPU_TIMEOUT = 10.0

# Only executable basenames listed here may be spawned
DEFAULT_WHITELIST = {"sh"}

# Audit log
LOG_DIR = Path(os.environ.get("ZYFETCH_LOG_DIR", Path.home() / ".zyfetch" / "logs"))
AUDIT_LOG_NAME = "zyfetch.log"

NOT_IMPLEMENTED = "Not Implemented"

BANNER_TITLE = "⚡ zyfetch ⚡"
BANNER_RULE = "-------------"
