from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Coroutine
from pathlib import Path
from typing import Annotated, Any, TypeVar

import typer
from pydantic import SecretStr, ValidationError

from mollie_sdk.client import AsyncMollieClient
from mollie_sdk.config.manager import ProfileManager
from mollie_sdk.config.models import ProfileConfig
from mollie_sdk.constants import DEFAULT_BASE_URL, SDK_VERSION
from mollie_sdk.errors import MollieError
from mollie_sdk.models import OnboardingData
from mollie_sdk.utils.output import OutputFormat, emit

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Mollie partner API CLI")
profiles_app = typer.Typer(no_args_is_help=True, help="Manage local API profiles")
organizations_app = typer.Typer(no_args_is_help=True, help="Organization APIs")
onboarding_app = typer.Typer(no_args_is_help=True, help="Onboarding APIs")

app.add_typer(profiles_app, name="profiles")
app.add_typer(organizations_app, name="organizations")
app.add_typer(onboarding_app, name="onboarding")


class CLIState:
    def __init__(
        self,
        *,
        profile: str | None,
        config_file: Path | None,
        output: OutputFormat,
    ) -> None:
        self.profile = profile
        self.config_file = config_file
        self.output = output


T = TypeVar("T")


def _run(awaitable: Coroutine[Any, Any, T]) -> T:
    return asyncio.run(awaitable)


def _state(ctx: typer.Context) -> CLIState:
    obj = ctx.obj
    if not isinstance(obj, CLIState):
        raise typer.BadParameter("CLI context was not initialized")
    return obj


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mollie {SDK_VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    profile: Annotated[str | None, typer.Option("--profile", "-p", help="Profile name")] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config-file", "-c", help="Path to profile config file"),
    ] = None,
    output: Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")] = "json",
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log HTTP traffic to stderr")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    _ = version
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    ctx.obj = CLIState(profile=profile, config_file=config_file, output=output)


def _make_client(state: CLIState) -> AsyncMollieClient:
    return AsyncMollieClient(profile=state.profile, config_path=state.config_file)


@app.command("configure")
def configure(
    ctx: typer.Context,
    api_token: Annotated[str, typer.Option(help="API key (live_/test_) or organization access token (access_)")],
    profile: Annotated[str, typer.Option(help="Profile name to write")] = "default",
    base_url: Annotated[str, typer.Option(help="Mollie API base URL")] = DEFAULT_BASE_URL,
    testmode: Annotated[bool, typer.Option("--testmode/--no-testmode")] = False,
    activate: Annotated[bool, typer.Option("--activate/--no-activate")] = True,
) -> None:
    state = _state(ctx)
    manager = ProfileManager(state.config_file)
    model = ProfileConfig(api_token=SecretStr(api_token), base_url=base_url, testmode=testmode)
    cfg = manager.upsert_profile(profile, model, activate=activate)
    emit(cfg, output=state.output)


@profiles_app.command("list")
def profiles_list(ctx: typer.Context) -> None:
    state = _state(ctx)
    manager = ProfileManager(state.config_file)
    names = manager.list_profiles()
    emit({"default_profile": manager.load().default_profile, "profiles": names}, output=state.output)


@profiles_app.command("show")
def profiles_show(
    ctx: typer.Context,
    name: Annotated[str | None, typer.Argument(help="Profile name")] = None,
) -> None:
    state = _state(ctx)
    manager = ProfileManager(state.config_file)
    emit(manager.get_profile(name), output=state.output)


@profiles_app.command("use")
def profiles_use(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Profile name")],
) -> None:
    state = _state(ctx)
    manager = ProfileManager(state.config_file)
    emit(manager.set_default_profile(name), output=state.output)


@profiles_app.command("delete")
def profiles_delete(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Profile name")],
) -> None:
    state = _state(ctx)
    manager = ProfileManager(state.config_file)
    emit(manager.delete_profile(name), output=state.output)


@organizations_app.command("get")
def organizations_get(ctx: typer.Context, organization_id: Annotated[str, typer.Argument()]) -> None:
    state = _state(ctx)

    async def run() -> Any:
        async with _make_client(state) as client:
            return await client.organizations.get(organization_id)

    emit(_run(run()), output=state.output)


@organizations_app.command("current")
def organizations_current(ctx: typer.Context) -> None:
    state = _state(ctx)

    async def run() -> Any:
        async with _make_client(state) as client:
            return await client.organizations.get_current()

    emit(_run(run()), output=state.output)


@organizations_app.command("partner")
def organizations_partner(ctx: typer.Context) -> None:
    state = _state(ctx)

    async def run() -> Any:
        async with _make_client(state) as client:
            return await client.organizations.get_partner_status()

    emit(_run(run()), output=state.output)


@onboarding_app.command("status")
def onboarding_status(ctx: typer.Context) -> None:
    state = _state(ctx)

    async def run() -> Any:
        async with _make_client(state) as client:
            return await client.onboarding.get_status()

    emit(_run(run()), output=state.output)


def _load_onboarding_data(path: Path | None) -> OnboardingData:
    if path is None:
        return OnboardingData()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        return OnboardingData.model_validate(payload)
    except (OSError, ValueError, ValidationError) as exc:
        raise typer.BadParameter(f"could not read onboarding data from {path}: {exc}") from exc


@onboarding_app.command("submit")
def onboarding_submit(
    ctx: typer.Context,
    file: Annotated[Path | None, typer.Option("--file", "-f", help="JSON file with onboarding data")] = None,
    organization_name: Annotated[str | None, typer.Option(help="Legal name of the organization")] = None,
    registration_number: Annotated[str | None, typer.Option(help="Chamber of commerce number")] = None,
    vat_number: Annotated[str | None, typer.Option(help="VAT number")] = None,
    website: Annotated[str | None, typer.Option(help="Website URL of the payment profile")] = None,
    email: Annotated[str | None, typer.Option(help="Contact email of the payment profile")] = None,
) -> None:
    state = _state(ctx)
    data = _load_onboarding_data(file)
    if organization_name is not None:
        data.organization.name = organization_name
    if registration_number is not None:
        data.organization.registrationNumber = registration_number
    if vat_number is not None:
        data.organization.vatNumber = vat_number
    if website is not None:
        data.profile.url = website
    if email is not None:
        data.profile.email = email

    async def run() -> None:
        async with _make_client(state) as client:
            await client.onboarding.submit(data)

    _run(run())
    emit({"submitted": True, "data": data}, output=state.output)


def run() -> None:
    try:
        app()
    except MollieError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from None


if __name__ == "__main__":
    run()
