"""Shared helpers for gitclient commands."""

import click

from gitclient.client import Client


def get_client(ctx: click.Context) -> Client:
    """Return the Client built by the top-level group."""
    ctx.ensure_object(dict)
    client = ctx.obj.get("client")
    if client is None:
        client = Client()
        ctx.obj["client"] = client
    return client
