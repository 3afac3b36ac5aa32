from rich.console import Console

from . import config

console = Console()


def show_banner(out=None):
    out = console if out is None else out
    out.print(f"[cyan bold]{config.BANNER_TITLE}[/cyan bold]", soft_wrap=True)
    out.print(f"[blue]{config.BANNER_RULE}[/blue]", soft_wrap=True)


if __name__ == "__main__":
    show_banner()
