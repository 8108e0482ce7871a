"""
Command-line interface for FreshBooks SDK.

Configuration comes from FRESHBOOKS_* environment variables or a .env file
(see FreshBooksSettings). Nothing is persisted: tokens printed by get-token and
refresh-token must be exported by the user, e.g. as FRESHBOOKS_ACCESS_TOKEN.

Available commands:
- auth-url: Print the authorization URL to visit
- get-token: Exchange an authorization code for tokens
- refresh-token: Exchange a refresh token for new tokens
- me: Show the identity behind the access token
- list: List entities of a resource
- get: Show one entity
- delete: Delete one entity
"""

import asyncio
import json
import logging

import click
from pydantic import ValidationError as PydanticValidationError

from freshbooks_sdk.client import FreshBooksClient
from freshbooks_sdk.config import FreshBooksSettings
from freshbooks_sdk.exceptions import FreshBooksError
from freshbooks_sdk.logging_middleware import LoggingMiddleware

logger = logging.getLogger("freshbooks_sdk.cli")

RESOURCES = ("clients", "invoices", "expenses", "payments", "taxes")


def _load_settings() -> FreshBooksSettings:
    try:
        return FreshBooksSettings()
    except PydanticValidationError as exc:
        missing = ", ".join(
            f"FRESHBOOKS_{str(error['loc'][0]).upper()}" for error in exc.errors()
        )
        raise click.ClickException(f"Invalid configuration: {missing}") from exc


def _make_client(verbose: bool = False) -> FreshBooksClient:
    middlewares = [LoggingMiddleware(level=logging.DEBUG)] if verbose else []
    return FreshBooksClient(_load_settings(), middlewares=middlewares)


def _run(operation, verbose: bool = False):
    """Run ``operation(client)`` on a fresh client and close it afterwards."""

    async def _main():
        client = _make_client(verbose)
        try:
            return await operation(client)
        finally:
            await client.aclose()

    try:
        return asyncio.run(_main())
    except FreshBooksError as exc:
        logger.debug("Command failed", exc_info=True)
        raise click.ClickException(str(exc)) from exc


def _echo_json(data):
    click.echo(json.dumps(data, indent=2, default=str))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP traffic")
@click.pass_context
def cli(ctx, verbose):
    """FreshBooks SDK CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    ctx.obj = {"verbose": verbose}


@cli.command("auth-url")
@click.option("--scope", "scopes", multiple=True, help="Scope to request (repeatable)")
def auth_url(scopes):
    """Print the URL where the user grants access."""
    client = FreshBooksClient(_load_settings())
    try:
        click.echo(client.authorization_url(list(scopes) or None))
    except FreshBooksError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command("get-token")
@click.option("--code", required=True, help="Authorization code from the redirect")
@click.pass_context
def get_token(ctx, code):
    """Exchange an authorization code for tokens."""

    async def _operation(client):
        return await client.get_access_token(code)

    token = _run(_operation, ctx.obj["verbose"])
    _echo_json({**token.to_dict(), "expires_at": token.expires_at.isoformat()})


@cli.command("refresh-token")
@click.option("--refresh-token", "refresh_token", default=None, help="Defaults to FRESHBOOKS_REFRESH_TOKEN")
@click.pass_context
def refresh_token_command(ctx, refresh_token):
    """Exchange a refresh token for new tokens."""

    async def _operation(client):
        return await client.refresh_access_token(refresh_token)

    token = _run(_operation, ctx.obj["verbose"])
    _echo_json({**token.to_dict(), "expires_at": token.expires_at.isoformat()})


@cli.command()
@click.pass_context
def me(ctx):
    """Show the identity behind the access token."""

    async def _operation(client):
        return await client.current_identity()

    identity = _run(_operation, ctx.obj["verbose"])
    click.echo(f"{identity.full_name} <{identity.email}>")
    for membership in identity.business_memberships:
        click.echo(
            f"  {membership.business.account_id or '-'}  {membership.business.name}  ({membership.role})"
        )


@cli.command("list")
@click.argument("resource", type=click.Choice(RESOURCES))
@click.option("--account-id", required=True, help="FreshBooks account id")
@click.option("--page", type=int, default=None)
@click.option("--per-page", type=int, default=None)
@click.pass_context
def list_command(ctx, resource, account_id, page, per_page):
    """List entities of RESOURCE."""

    async def _operation(client):
        return await getattr(client, resource).list(
            account_id, page=page, per_page=per_page
        )

    result = _run(_operation, ctx.obj["verbose"])
    _echo_json(
        {
            "page": result.page,
            "pages": result.pages,
            "per_page": result.per_page,
            "total": result.total,
            resource: [item.to_dict() for item in result.items],
        }
    )


@cli.command()
@click.argument("resource", type=click.Choice(RESOURCES))
@click.argument("entity_id")
@click.option("--account-id", required=True, help="FreshBooks account id")
@click.pass_context
def get(ctx, resource, entity_id, account_id):
    """Show one entity of RESOURCE."""

    async def _operation(client):
        return await getattr(client, resource).get(account_id, entity_id)

    _echo_json(_run(_operation, ctx.obj["verbose"]).to_dict())


@cli.command()
@click.argument("resource", type=click.Choice(RESOURCES))
@click.argument("entity_id")
@click.option("--account-id", required=True, help="FreshBooks account id")
@click.pass_context
def delete(ctx, resource, entity_id, account_id):
    """Delete one entity of RESOURCE."""

    async def _operation(client):
        await getattr(client, resource).delete(account_id, entity_id)

    _run(_operation, ctx.obj["verbose"])
    click.echo(f"Deleted {resource} {entity_id}")


if __name__ == "__main__":
    cli()
