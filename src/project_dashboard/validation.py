"""Pydantic validation for typer command arguments."""

from collections.abc import Callable
from typing import Any, TypeVar

from makefun import wraps
from pydantic import BaseModel, ValidationError
import typer

F = TypeVar("F", bound=Callable[..., Any])


def validate(model_class: type[BaseModel]) -> Callable[[F], F]:
    """Check a command's arguments against a dashboard input model.

    Arguments whose names match fields of ``model_class`` (``FilterOptions``
    for ``project list``/``export``, ``ProjectCreate`` for ``project add``,
    ``TagName`` for ``tag add``) are validated together. The command then
    receives the validated values, so ``--status live`` arrives as
    ``ProjectStatus.LIVE`` and ``--usefulness 4`` as ``4``. Other arguments
    pass through unchanged.

    On failure every error is printed as ``✗ <field>: <message>`` on stderr
    and the command exits with code 1 before touching the project store.

    Example:
        @app.command()
        @validate(TagName)
        def add(project_id: str, tag: str):
            ...
    """

    def decorator(func: F) -> F:
        # makefun keeps the signature typer inspects for options and --help
        @wraps(func)
        def wrapper(**kwargs: Any) -> Any:
            model_fields = model_class.model_fields.keys()
            checked = {k: v for k, v in kwargs.items() if k in model_fields}

            try:
                validated = model_class(**checked)
            except ValidationError as e:
                for err in e.errors():
                    loc = ".".join(str(x) for x in err["loc"])
                    typer.echo(f"✗ {loc}: {err['msg']}", err=True)
                raise typer.Exit(1) from e

            passthrough = {k: v for k, v in kwargs.items() if k not in model_fields}
            return func(**{k: getattr(validated, k) for k in checked}, **passthrough)

        return wrapper  # type: ignore

    return decorator
