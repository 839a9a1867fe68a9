"""difftex CLI — Typer application with diff, log, and init commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from difftex import __version__
from difftex.git.models import LineKind, Mode

app = typer.Typer(
    name="difftex",
    help="Render git diffs and commit history as colour-coded LaTeX.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _resolve_repo_root(repo: Optional[Path]) -> Path:
    """Find the git repo root, exit 2 on failure."""
    from difftex.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root(repo)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _read_input(source: str) -> str:
    """Read diff text from a file, or stdin when *source* is ``-``."""
    if source == "-":
        return sys.stdin.buffer.read().decode("utf-8", errors="replace")
    try:
        return Path(source).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        console.print(f"[bold red]Input error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _render(
    mode: Mode,
    *,
    ref: Optional[str],
    output: Optional[str],
    repo: Optional[Path],
    input_file: Optional[str],
    unified: Optional[int],
    max_count: Optional[int],
    config: Optional[str],
    verbose: bool,
) -> None:
    from difftex.config.loader import ConfigError, load_config, validate
    from difftex.git.adapter import GitError, get_diff, get_log
    from difftex.output.writer import OutputError, write_document
    from difftex.render.builder import DocumentBuilder

    # --- Locate repository (not required for --input) ---
    if input_file:
        repo_root = repo or Path.cwd()
    else:
        repo_root = _resolve_repo_root(repo)

    # --- Load config ---
    try:
        cfg = load_config(repo_root, config)
        if ref:
            cfg.git.ref = ref
        if output:
            cfg.output.path = output
        if unified is not None:
            cfg.git.unified = unified
        if max_count is not None:
            cfg.git.max_count = max_count
        validate(cfg)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Mode: {mode.value}[/dim]")
        console.print(f"[dim]Repo root: {repo_root}[/dim]")
        if not input_file:
            console.print(f"[dim]Reference: {cfg.git.ref}[/dim]")

    # --- Get history text ---
    if input_file:
        text = _read_input(input_file)
    else:
        try:
            if mode is Mode.LOG:
                text = get_log(
                    repo_root,
                    cfg.git.ref,
                    unified=cfg.git.unified,
                    max_count=cfg.git.max_count or None,
                    timeout=cfg.git.timeout,
                )
            else:
                text = get_diff(
                    repo_root, cfg.git.ref, unified=cfg.git.unified, timeout=cfg.git.timeout
                )
        except GitError as exc:
            console.print(f"[bold red]Git error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc

    if not text.strip():
        console.print("[dim]No changes found — writing an empty document.[/dim]")

    # --- Build document ---
    builder = DocumentBuilder(
        mode,
        commit_id_width=cfg.document.commit_id_width,
        title=cfg.document.title or None,
        author=cfg.document.author or None,
    )
    builder.feed_text(text)
    document = builder.finish()

    if verbose:
        counts = builder.state.line_counts
        if mode is Mode.LOG:
            console.print(f"[dim]Commits:[/dim]  {builder.state.commit_count}")
        console.print(f"[dim]Files:[/dim]    {builder.state.file_count}")
        console.print(f"[dim]Added:[/dim]    {counts.get(LineKind.ADDITION, 0)}")
        console.print(f"[dim]Removed:[/dim]  {counts.get(LineKind.DELETION, 0)}")

    # --- Write ---
    target = cfg.output.resolve(mode)
    try:
        written = write_document(target, document)
    except OutputError as exc:
        console.print(f"[bold red]Output error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    console.print(f"[green]✓[/green] Successfully generated {written}")


# ── diff ──────────────────────────────────────────────────────────────────────


@app.command()
def diff(
    ref: Optional[str] = typer.Option(None, "--ref", "-r", help="Reference to diff against (e.g. HEAD~1, main)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output LaTeX file"),
    repo: Optional[Path] = typer.Option(None, "--repo", help="Repository directory (default: current directory)"),
    input_file: Optional[str] = typer.Option(None, "--input", "-i", help="Render an existing patch file ('-' for stdin)"),
    unified: Optional[int] = typer.Option(None, "--unified", "-U", help="Context lines around each hunk"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .difftex.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Render the diff between the working tree and a reference."""
    _render(
        Mode.DIFF,
        ref=ref,
        output=output,
        repo=repo,
        input_file=input_file,
        unified=unified,
        max_count=None,
        config=config,
        verbose=verbose,
    )


# ── log ───────────────────────────────────────────────────────────────────────


@app.command()
def log(
    ref: Optional[str] = typer.Option(None, "--ref", "-r", help="Reference to start the history from"),
    max_count: Optional[int] = typer.Option(None, "--max-count", "-n", help="Limit the number of commits"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output LaTeX file"),
    repo: Optional[Path] = typer.Option(None, "--repo", help="Repository directory (default: current directory)"),
    input_file: Optional[str] = typer.Option(None, "--input", "-i", help="Render saved 'git log -p' output ('-' for stdin)"),
    unified: Optional[int] = typer.Option(None, "--unified", "-U", help="Context lines around each hunk"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .difftex.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Render the commit history with patches, one section per commit."""
    _render(
        Mode.LOG,
        ref=ref,
        output=output,
        repo=repo,
        input_file=input_file,
        unified=unified,
        max_count=max_count,
        config=config,
        verbose=verbose,
    )


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    repo: Optional[Path] = typer.Option(None, "--repo", help="Repository directory (default: current directory)"),
) -> None:
    """Generate a starter .difftex.toml in the repo root."""
    from difftex.config.defaults import CONFIG_FILENAME, DEFAULT_TOML

    repo_root = _resolve_repo_root(repo)
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"difftex {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """difftex — Render git history as a printable LaTeX document."""
