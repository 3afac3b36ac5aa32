"""
Report assembly.

Getters run once each, in display order. The first failure propagates, so a
Report only exists when every field was collected.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.text import Text

from . import config, sysinfo
from .banner import show_banner
from .errors import InvalidFormat

console = Console()

DEFAULT_GETTERS: List[Tuple[str, Callable[[], str]]] = [
    ("OS", sysinfo.get_os),
    ("Host", sysinfo.get_host),
    ("Kernel", sysinfo.get_kernel),
    ("Uptime", sysinfo.get_uptime),
    ("Packages", sysinfo.get_packages),
    ("Shell", sysinfo.get_shell),
    ("CPU", sysinfo.get_cpu),
    ("Memory", sysinfo.get_memory),
    ("Disk", sysinfo.get_disk),
]


@dataclass(frozen=True)
class Field:
    label: str
    value: str

    def as_rich(self) -> Text:
        # rich drops control characters such as \r from the value
        return Text.assemble((f"{self.label}:", "bold green"), " ", self.value)

    def __str__(self):
        return self.as_rich().plain


@dataclass(frozen=True)
class Report:
    fields: Tuple[Field, ...]

    def as_text(self) -> str:
        lines = [config.BANNER_TITLE, config.BANNER_RULE]
        lines.extend(str(field) for field in self.fields)
        return "\n".join(lines) + "\n"


def collect_report(getters: Optional[Sequence[Tuple[str, Callable[[], str]]]] = None) -> Report:
    """Call each getter in order and freeze the results into a Report."""
    fields = []
    for label, getter in DEFAULT_GETTERS if getters is None else getters:
        value = getter()
        if not value:
            raise InvalidFormat(f"{label} is empty")
        fields.append(Field(label, value))
    return Report(tuple(fields))


def render_report(report: Report, out: Optional[Console] = None):
    out = console if out is None else out
    show_banner(out)
    for field in report.fields:
        out.print(field.as_rich(), highlight=False, soft_wrap=True)
