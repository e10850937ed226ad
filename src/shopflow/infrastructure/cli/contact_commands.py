"""CLI commands for contact details (phone numbers and emails)."""

from __future__ import annotations

import click

from shopflow.domain.exceptions import DomainException
from shopflow.domain.model.value_objects import Email, PhoneNumber


@click.command("phone")
@click.argument("raw")
def contact_phone(raw: str) -> None:
    """Normalize a Vietnamese mobile number."""
    try:
        phone = PhoneNumber(raw)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Normalized:    {phone.value}")
    click.echo(f"Local:         {phone.local_format}")
    click.echo(f"International: {phone.international_format}")


@click.command("email")
@click.argument("raw")
def contact_email(raw: str) -> None:
    """Validate and normalize an email address."""
    try:
        email = Email(raw)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Email:  {email.value}")
    click.echo(f"Domain: {email.domain}")
