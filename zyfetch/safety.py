"""
Safety helpers for zyfetch.

Responsibilities:
- Safe subprocess execution with whitelist and timeout
- Audit logging (JSON-lines)
"""

import json
import os
import shlex
import signal
import subprocess
from datetime import datetime, timezone
from getpass import getuser

from . import config


class SafeExecutionError(Exception):
    pass


def audit_log_path():
    return config.LOG_DIR / config.AUDIT_LOG_NAME


def _current_user():
    try:
        return getuser()
    except (KeyError, OSError):
        return str(os.getuid())


def _audit_log(action, details):
    entry = {
        "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "user": _current_user(),
        "action": action,
        "details": details,
    }
    try:
        config.LOG_DIR.mkdir(parents=True, exist_ok=True)
        with audit_log_path().open("a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")
    except OSError:
        # Best-effort logging; do not crash main flow
        pass


def _kill_group(p):
    # pipeline stages share the shell's process group
    try:
        os.killpg(p.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass


def run_safe_command(cmd, whitelist=None, timeout=20):
    """
    Run `cmd` (an argv list) and capture its whole output.

    The child gets its own session, so a timeout kills every process of a
    shell pipeline, not only the shell.

    Returns a dict: {ok: bool, returncode: int, stdout: str, stderr: str, cmd: str}
    """
    parts = [str(x) for x in cmd]
    if not parts:
        raise SafeExecutionError("Empty command")

    exe = os.path.basename(parts[0])
    allowed = set(config.DEFAULT_WHITELIST) if whitelist is None else set(whitelist)
    if exe not in allowed:
        raise SafeExecutionError(f"Executable '{exe}' not allowed by whitelist")

    cmd_str = " ".join(shlex.quote(p) for p in parts)
    _audit_log("run_safe_command_request", {"cmd": cmd_str, "exe": exe, "timeout": timeout})

    try:
        p = subprocess.Popen(
            parts, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, start_new_session=True
        )
    except OSError as e:
        _audit_log("run_safe_command_failed", {"cmd": cmd_str, "error": str(e)})
        raise SafeExecutionError(str(e)) from e

    try:
        out, err = p.communicate(timeout=timeout)
    except subprocess.TimeoutExpired:
        _kill_group(p)
        out, _ = p.communicate()
        _audit_log("run_safe_command_timeout", {"cmd": cmd_str, "timeout": timeout})
        return {"ok": False, "returncode": None, "stdout": out or "", "stderr": "Timed out", "cmd": cmd_str}

    _audit_log("run_safe_command_executed", {"cmd": cmd_str, "returncode": p.returncode})
    return {"ok": p.returncode == 0, "returncode": p.returncode, "stdout": out or "", "stderr": err or "", "cmd": cmd_str}


__all__ = [
    "run_safe_command",
    "SafeExecutionError",
    "audit_log_path",
]
