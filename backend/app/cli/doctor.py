"""Doctor command: verify a running stack answers the way the setup expects."""

from __future__ import annotations

from dataclasses import dataclass

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from app import schemas
from app.config import Settings, get_settings

app = typer.Typer(help="Check that the backend and frontend containers are up.")

_console = Console()


@dataclass
class CheckResult:
    name: str
    ok: bool
    detail: str


def build_client(
    settings: Settings | None = None,
    *,
    timeout: float = 5.0,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    settings = settings or get_settings()
    return httpx.Client(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={"User-Agent": f"{settings.app_name}-doctor"},
        transport=transport,
    )


def check_greeting(client: httpx.Client, backend_url: str, expected: str) -> CheckResult:
    name = "Backend greeting"
    try:
        response = client.get(backend_url.rstrip("/") + "/")
    except httpx.HTTPError as exc:
        return CheckResult(name, False, str(exc))
    if response.status_code != 200:
        return CheckResult(name, False, f"HTTP {response.status_code}")
    try:
        greeting = schemas.Greeting.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        return CheckResult(name, False, f"unexpected payload: {exc}")
    if greeting.message != expected:
        return CheckResult(name, False, f"got {greeting.message!r}, expected {expected!r}")
    return CheckResult(name, True, greeting.message)


def check_health(client: httpx.Client, backend_url: str) -> CheckResult:
    name = "Backend health"
    try:
        response = client.get(backend_url.rstrip("/") + "/health")
    except httpx.HTTPError as exc:
        return CheckResult(name, False, str(exc))
    if response.status_code != 200:
        return CheckResult(name, False, f"HTTP {response.status_code}")
    try:
        status = schemas.HealthStatus.model_validate(response.json()).status
    except (ValueError, ValidationError) as exc:
        return CheckResult(name, False, f"unexpected payload: {exc}")
    return CheckResult(name, status == "ok", status)


def check_frontend(client: httpx.Client, frontend_url: str) -> CheckResult:
    name = "Frontend dev server"
    try:
        response = client.get(frontend_url)
    except httpx.HTTPError as exc:
        return CheckResult(name, False, str(exc))
    return CheckResult(name, response.is_success, f"HTTP {response.status_code}")


def run_checks(
    client: httpx.Client,
    *,
    backend_url: str,
    frontend_url: str,
    greeting: str,
    skip_frontend: bool = False,
) -> list[CheckResult]:
    results = [
        check_greeting(client, backend_url, greeting),
        check_health(client, backend_url),
    ]
    if not skip_frontend:
        results.append(check_frontend(client, frontend_url))
    return results


@app.command()
def run(
    backend_url: str | None = typer.Option(None, help="Backend origin (default: BACKEND_URL)."),
    frontend_url: str | None = typer.Option(None, help="Frontend origin (default: FRONTEND_URL)."),
    greeting: str | None = typer.Option(None, help="Expected greeting (default: GREETING_MESSAGE)."),
    skip_frontend: bool = typer.Option(False, "--skip-frontend", help="Only check the backend."),
    timeout: float = typer.Option(5.0, min=0.1, help="Per-request timeout in seconds."),
) -> None:
    """Run the stack checks and print a summary table."""

    settings = get_settings()
    backend_url = backend_url or settings.backend_url
    frontend_url = frontend_url or settings.frontend_url
    greeting = greeting if greeting is not None else settings.greeting_message

    with build_client(settings, timeout=timeout) as client:
        results = run_checks(
            client,
            backend_url=backend_url,
            frontend_url=frontend_url,
            greeting=greeting,
            skip_frontend=skip_frontend,
        )

    table = Table(title="Stack Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    for result in results:
        table.add_row(result.name, "OK" if result.ok else "FAIL", result.detail)
    _console.print(table)

    if not all(r.ok for r in results):
        _console.print(
            "\n[yellow]Note:[/yellow] start the stack with `docker compose up --build` and retry."
        )
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
