import sys

from rich.console import Console

from .errors import FetchError
from .report import collect_report, render_report
from .safety import _audit_log

err_console = Console(stderr=True)


def main():
    """Collect every field, then print the report. Returns the exit status."""
    try:
        report = collect_report()
    except FetchError as e:
        _audit_log("fetch_failed", {"error": type(e).__name__, "message": str(e)})
        err_console.print(f"error: {type(e).__name__}: {e}", markup=False, highlight=False, soft_wrap=True)
        return 1

    render_report(report)
    _audit_log("report_printed", {"fields": [field.label for field in report.fields]})
    return 0


if __name__ == "__main__":
    sys.exit(main())
