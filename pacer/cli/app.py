# pacer/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables (e.g. PACER_CONFIG) before settings are resolved
load_dotenv()

from ..config.settings import settings_manager


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=True,
    help="Drive timed workout playlists: segment timing, pause accounting & BPM-matched playlists",
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings & initialize verbose logging before any subcommand
@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    from ..core.verbose import cleanup_verbose, init_verbose, vlog_config

    # log_file implies verbose mode
    verbose_enabled = verbose or log_file is not None
    dev_mode = ctx.obj.dev_mode if hasattr(ctx.obj, "dev_mode") else False
    init_verbose(
        enabled=verbose_enabled,
        log_file=log_file,
        dev_mode=dev_mode,
        command=ctx.invoked_subcommand or "pacer",
    )
    # flush & close the log file once the command finishes
    ctx.call_on_close(cleanup_verbose)
    vlog_config("config_path", settings_manager.config_path)


# ! import command modules here to avoid circular import w/ app object
from .commands import run as _run  # noqa: F401, E402
from .commands import show as _show  # noqa: F401, E402
from .commands import workout as _workout  # noqa: F401, E402
from .commands import generate as _generate  # noqa: F401, E402
from .commands import config as _config  # noqa: F401, E402


def main() -> None:
    app()
