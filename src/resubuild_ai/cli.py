"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable
from pathlib import Path
from typing import TypeVar

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from resubuild_ai.capabilities.service import ResumeAIService
from resubuild_ai.clients.job_client import JobSearchClient
from resubuild_ai.config import AppConfig, load_config
from resubuild_ai.errors import MalformedResponse, MissingCredential, UpstreamError
from resubuild_ai.generation.normalizer import resume_from_data
from resubuild_ai.models.analysis import AuditResult
from resubuild_ai.models.chat import JobSuggestion, ResumeUpdate
from resubuild_ai.models.jobs import JobPost
from resubuild_ai.models.resume import ResumeProfile
from resubuild_ai.settings.local_store import LocalSettingsStore
from resubuild_ai.usage.cost_calculator import calculate_cost

T = TypeVar("T")

app = typer.Typer(
    name="resubuild",
    help="AI résumé builder tools",
    no_args_is_help=True,
)
settings_app = typer.Typer(help="Manage the stored API key and preferred model.", no_args_is_help=True)
app.add_typer(settings_app, name="settings")
console = Console()


def _store(config: AppConfig) -> LocalSettingsStore:
    return LocalSettingsStore(config.settings.resolved_db_path)


def _service(config: AppConfig) -> ResumeAIService:
    return ResumeAIService.from_config(config, _store(config))


def _load_resume(path: Path) -> ResumeProfile:
    if not path.exists():
        console.print(f"[red]Resume file not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        return resume_from_data(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, MalformedResponse) as exc:
        console.print(f"[red]Not a valid resume JSON file: {exc}[/red]")
        raise typer.Exit(1)


def _save_resume(resume: ResumeProfile, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(resume.to_wire(), indent=2, ensure_ascii=False), encoding="utf-8")
    console.print(f"[green]Resume saved: {path}[/green]")


def _run(service: ResumeAIService, coro: Awaitable[T], status: str, verbose: bool = False) -> T:
    """Run one capability call, turning layer errors into CLI messages."""
    try:
        with console.status(status):
            result = asyncio.run(coro)
    except MissingCredential as exc:
        console.print(f"[red]{exc}[/red]")
        console.print("[dim]Run: resubuild settings set-key <KEY>, or set GEMINI_API_KEY.[/dim]")
        raise typer.Exit(1)
    except (UpstreamError, MalformedResponse) as exc:
        console.print(f"[red]Request failed. Please try again. ({exc})[/red]")
        raise typer.Exit(1)

    if verbose:
        usage = service.llm.get_token_summary()
        cost = calculate_cost(usage["calls"])
        console.print(f"[dim]Tokens: {usage['input']} in / {usage['output']} out, ~${cost:.4f}[/dim]")
    return result


def _print_audit(audit: AuditResult, title: str) -> None:
    color = "green" if audit.score >= 80 else "yellow" if audit.score >= 60 else "red"
    body = f"[bold {color}]Score: {audit.score}/100[/bold {color}]\n\n{audit.summary}"
    console.print(Panel(body, title=title))
    if audit.strengths:
        console.print("\n[green]Strengths:[/green]")
        for s in audit.strengths:
            console.print(f"  - {s}")
    if audit.improvements:
        console.print("\n[yellow]Improvements:[/yellow]")
        for s in audit.improvements:
            console.print(f"  - {s}")


def _print_jobs(jobs: list[JobPost]) -> None:
    if not jobs:
        console.print("[yellow]No matching jobs found.[/yellow]")
        return
    table = Table(title=f"{len(jobs)} jobs")
    table.add_column("Title")
    table.add_column("Company")
    table.add_column("Location")
    table.add_column("URL", overflow="fold")
    for job in jobs:
        table.add_row(job.title, job.company_name, job.candidate_required_location, job.url)
    console.print(table)


def _job_client(config: AppConfig) -> JobSearchClient:
    return JobSearchClient(
        api_url=config.jobs.api_url,
        cache_minutes=config.jobs.cache_minutes,
        max_results=config.jobs.max_results,
    )


def _print_fetches(client: JobSearchClient) -> None:
    count = client.get_fetch_count()
    console.print(f"[dim]Job listing fetches: {count}[/dim]")


@settings_app.command("show")
def settings_show() -> None:
    """Show the stored settings."""
    config = load_config()
    store = _store(config)
    key = store.get_api_key()
    masked = f"{key[:4]}...{key[-4:]}" if key and len(key) > 8 else ("set" if key else "not set")
    console.print(f"API key: {masked}" + ("" if key or not store.has_api_key() else " (using environment)"))
    console.print(f"Preferred model: {store.get_preferred_model() or config.llm.default_model}")
    console.print(f"Complex tasks use: {config.llm.high_capability_model} unless the preferred model is a pro model")


@settings_app.command("set-key")
def settings_set_key(key: str = typer.Argument(help="Gemini API key")) -> None:
    """Store a Gemini API key."""
    _store(load_config()).save_api_key(key)
    console.print("[green]API key saved.[/green]")


@settings_app.command("clear-key")
def settings_clear_key() -> None:
    """Remove the stored API key."""
    _store(load_config()).remove_api_key()
    console.print("[green]API key removed.[/green]")


@settings_app.command("set-model")
def settings_set_model(model: str = typer.Argument(help="Model identifier, e.g. gemini-2.5-flash")) -> None:
    """Set the preferred model."""
    _store(load_config()).set_preferred_model(model)
    console.print(f"[green]Preferred model: {model}[/green]")


@app.command()
def summary(
    resume: Path = typer.Argument(help="Resume JSON file"),
    save: bool = typer.Option(False, "--save", help="Write the summary back into the resume file"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Write a professional summary for a resume."""
    config = load_config()
    data = _load_resume(resume)
    service = _service(config)
    text = _run(service, service.generate_summary(data), "Writing summary...", verbose)
    console.print(Panel(text, title="Summary"))
    if save:
        data.personal_info.summary = text
        _save_resume(data, resume)


@app.command()
def audit(
    resume: Path = typer.Argument(help="Resume JSON file"),
    deep: bool = typer.Option(False, "--deep", help="Run the deep audit on the high-capability model"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Score a resume and list strengths and improvements."""
    config = load_config()
    data = _load_resume(resume)
    service = _service(config)
    if deep:
        result = _run(service, service.deep_audit_resume(data), "Running deep audit...", verbose)
    else:
        result = _run(service, service.audit_resume(data), "Auditing resume...", verbose)
    _print_audit(result, "Deep audit" if deep else "Audit")


@app.command("cover-letter")
def cover_letter(
    resume: Path = typer.Argument(help="Resume JSON file"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    company: str = typer.Option("", "--company", "-c"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the letter to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Write a cover letter for a job description."""
    if not jd.exists():
        console.print(f"[red]Job description file not found: {jd}[/red]")
        raise typer.Exit(1)
    config = load_config()
    data = _load_resume(resume)
    service = _service(config)
    letter = _run(
        service,
        service.generate_cover_letter(data, jd.read_text(encoding="utf-8"), company),
        "Writing cover letter...",
        verbose,
    )
    if output:
        output.write_text(letter, encoding="utf-8")
        console.print(f"[green]Cover letter saved: {output}[/green]")
    else:
        console.print(Panel(letter, title="Cover letter"))


@app.command()
def chat(
    resume: Path = typer.Argument(help="Resume JSON file"),
    message: str = typer.Argument(help="What you want to change or ask"),
    save: bool = typer.Option(False, "--save", help="Write edits back into the resume file"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Edit the resume, find jobs, or just ask a question."""
    config = load_config()
    data = _load_resume(resume)
    service = _service(config)
    result = _run(service, service.chat_with_resume(data, message), "Thinking...", verbose)

    if result.text:
        console.print(Panel(result.text, title="Assistant"))
    if isinstance(result, ResumeUpdate):
        if save:
            _save_resume(result.updated_resume, resume)
        else:
            console.print("[dim]Resume updated in memory. Re-run with --save to keep the change.[/dim]")
    elif isinstance(result, JobSuggestion):
        query = result.search_query
        console.print(f"[dim]Searching jobs: {query.query} {query.location}[/dim]")
        client = _job_client(config)
        jobs = asyncio.run(client.search(query.query, query.location))
        _print_jobs(jobs)
        if verbose:
            _print_fetches(client)


@app.command()
def generate(
    prompt: str = typer.Argument(help="Describe the resume you want"),
    output: Path = typer.Option(Path("resume.json"), "--output", "-o"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Generate a complete resume from a description."""
    config = load_config()
    service = _service(config)
    result = _run(service, service.generate_resume_from_prompt(prompt), "Generating resume...", verbose)
    _save_resume(result, output)


@app.command()
def portfolio(
    resume: Path = typer.Argument(help="Resume JSON file"),
    output: Path = typer.Option(Path("portfolio.html"), "--output", "-o"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Build a single-file interactive portfolio site."""
    config = load_config()
    data = _load_resume(resume)
    service = _service(config)
    html = _run(service, service.generate_interactive_portfolio(data), "Building portfolio...", verbose)
    output.write_text(html, encoding="utf-8")
    console.print(f"[green]Portfolio saved: {output}[/green]")


@app.command()
def jobs(
    query: str = typer.Argument("", help="Title, company or category"),
    location: str = typer.Option("", "--location", "-l"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Search remote job listings."""
    config = load_config()
    client = _job_client(config)
    with console.status("Searching jobs..."):
        results = asyncio.run(client.search(query, location))
    _print_jobs(results)
    if verbose:
        _print_fetches(client)


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)


if __name__ == "__main__":
    app()
