import math
import os

import psutil
from rich.console import Console

from . import config
from .errors import CommandFailed, InvalidFormat, ShellNotFound, StatvfsFailed
from .lines import get_line_part, get_line_part_and_rest, read_line, trim_name
from .safety import SafeExecutionError, run_safe_command

err_console = Console(stderr=True)

GIB = 1024 ** 3


def format_uptime(seconds):
    """Format seconds as 'D days, H hours, M minutes, S seconds'."""
    days = math.floor(seconds / 86400)
    seconds -= days * 86400
    hours = math.floor(seconds / 3600)
    seconds -= hours * 3600
    minutes = math.floor(seconds / 60)
    seconds -= minutes * 60
    return f"{days} days, {hours} hours, {minutes} minutes, {seconds:.0f} seconds"


def format_memory(kib):
    # /proc/meminfo reports KiB
    return f"{kib / 1024 / 1024:.2f} GiB"


def format_disk(used, total, mount=None):
    mount = config.DISK_MOUNT if mount is None else mount
    percent = math.floor(used / total * 100) if total else 0
    return f"({mount}): {used / GIB:.2f} GiB / {total / GIB:.2f} GiB ({percent}%)"


def get_os(path=None):
    path = config.OS_RELEASE if path is None else path
    return trim_name(read_line(path, "PRETTY_NAME="))


def get_host(path=None):
    path = config.HOSTNAME if path is None else path
    return read_line(path, "")


def get_kernel(path=None):
    path = config.PROC_VERSION if path is None else path
    return get_line_part(read_line(path, ""), 2)


def get_uptime(path=None):
    path = config.PROC_UPTIME if path is None else path
    raw = get_line_part(read_line(path, ""), 0)
    try:
        seconds = float(raw)
    except ValueError as e:
        raise InvalidFormat(f"uptime is not a number: {raw!r}") from e
    return format_uptime(seconds)


def get_packages():
    return config.NOT_IMPLEMENTED


def get_shell(environ=None):
    environ = os.environ if environ is None else environ
    shell = environ.get("SHELL")
    if not shell:
        raise ShellNotFound("SHELL is not set")
    return shell


def get_resolution():
    return config.NOT_IMPLEMENTED


def get_wm():
    return config.NOT_IMPLEMENTED


def get_terminal():
    return config.NOT_IMPLEMENTED


def get_cpu(path=None):
    path = config.PROC_CPUINFO if path is None else path
    return get_line_part_and_rest(read_line(path, "model name"), 2)


def gpu_timeout(environ=None):
    """Seconds to wait for the GPU lookup, from ZYFETCH_GPU_TIMEOUT."""
    environ = os.environ if environ is None else environ
    raw = environ.get("ZYFETCH_GPU_TIMEOUT")
    if raw is None:
        return config.GPU_TIMEOUT
    try:
        seconds = float(raw)
    except ValueError as e:
        raise InvalidFormat(f"ZYFETCH_GPU_TIMEOUT is not a number: {raw!r}") from e
    if not seconds > 0:
        raise InvalidFormat(f"ZYFETCH_GPU_TIMEOUT must be positive: {raw!r}")
    return seconds


def get_vga_info(command=None, timeout=None):
    """Return the raw `lspci | grep VGA` output."""
    command = config.GPU_COMMAND if command is None else command
    timeout = gpu_timeout() if timeout is None else timeout
    try:
        result = run_safe_command(command, timeout=timeout)
    except SafeExecutionError as e:
        raise CommandFailed(str(e)) from e
    if not result["ok"]:
        raise CommandFailed(f"{result['cmd']} exited with {result['returncode']}: {result['stderr'].strip()}")
    return result["stdout"]


def get_gpu(command=None, timeout=None):
    vga_line = get_vga_info(command, timeout)
    # Vendor parsing is not done yet; only the raw line is shown
    err_console.print(f"Line: {vga_line}", markup=False, highlight=False, soft_wrap=True)
    return config.NOT_IMPLEMENTED


def get_memory(path=None):
    path = config.PROC_MEMINFO if path is None else path
    raw = get_line_part(read_line(path, "MemTotal"), 7)
    try:
        kib = int(raw)
    except ValueError as e:
        raise InvalidFormat(f"MemTotal is not a number: {raw!r}") from e
    return format_memory(kib)


def get_disk(mount=None):
    mount = config.DISK_MOUNT if mount is None else mount
    try:
        usage = psutil.disk_usage(mount)
    except OSError as e:
        raise StatvfsFailed(f"statvfs({mount}) failed: {e}") from e
    return format_disk(usage.used, usage.total, mount)
