"""Command group factory: list/get/create/update/delete for one entity.

Create and update options are derived from the entity's request models, so
``--card-number-id`` exists because ``EmployeeCreate.card_number_id`` does.
Options default to None; only values the user typed reach the model, which
performs the field-level pre-validation before the service is called.
"""

from __future__ import annotations

import types
from typing import TYPE_CHECKING, Any, Union, get_args, get_origin

import click
from pydantic import BaseModel, ValidationError

from inventoryctl.commands._base import InvCommand, InvGroup
from inventoryctl.domain.entities import INT_MAX
from inventoryctl.services._helpers import validation_failure

if TYPE_CHECKING:
    from inventoryctl.commands._context import AppContext
    from inventoryctl.domain.catalog import EntityDefinition

_CLICK_TYPES: dict[type, click.ParamType] = {
    int: click.INT,
    float: click.FLOAT,
    str: click.STRING,
}

_RECORD_ID = click.IntRange(-INT_MAX, INT_MAX)


def _field_type(annotation: Any) -> click.ParamType:
    """Map a model field annotation (``int``, ``float | None``...) to a Click type."""
    if get_origin(annotation) in (Union, types.UnionType):
        annotation = next(a for a in get_args(annotation) if a is not type(None))
    return _CLICK_TYPES.get(annotation, click.STRING)


def _model_options(model: type[BaseModel], *, required: bool) -> list[click.Option]:
    options: list[click.Option] = []
    for name, info in model.model_fields.items():
        suffix = " [required]" if required else ""
        options.append(
            click.Option(
                [f"--{name.replace('_', '-')}", name],
                type=_field_type(info.annotation),
                default=None,
                help=f"{name.replace('_', ' ').capitalize()}.{suffix}",
            )
        )
    return options


def _supplied(values: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


def build_entity_group(
    definition: EntityDefinition[Any, Any, Any],
    *,
    examples: str,
    help_text: str,
) -> click.Group:
    """Build the ``<kind>`` command group for *definition*."""
    kind = definition.kind.value

    @click.group(name=kind, cls=InvGroup, examples=examples, help=help_text)
    def group() -> None:
        pass

    @group.command(name="list", help=f"List all {definition.plural}.")
    @click.pass_obj
    def list_cmd(app: AppContext) -> None:
        app.emit(app.warehouse.service(kind).list_all())

    @group.command(name="get", help=f"Show one {kind} by ID.")
    @click.argument("record_id", type=_RECORD_ID)
    @click.pass_obj
    def get_cmd(app: AppContext, record_id: int) -> None:
        app.emit(app.warehouse.service(kind).get(record_id))

    def create_callback(**fields: Any) -> None:
        app: AppContext = click.get_current_context().obj
        try:
            request = definition.create_model.model_validate(_supplied(fields))
        except ValidationError as exc:
            app.emit(validation_failure(f"create_{kind}", exc))
            return
        app.emit(app.warehouse.service(kind).create(request))

    group.add_command(
        InvCommand(
            name="create",
            callback=create_callback,
            params=_model_options(definition.create_model, required=True),
            help=f"Create a {kind}. The ID is assigned automatically.",
        )
    )

    def update_callback(record_id: int, **fields: Any) -> None:
        app: AppContext = click.get_current_context().obj
        try:
            request = definition.update_model.model_validate(_supplied(fields))
        except ValidationError as exc:
            app.emit(validation_failure(f"update_{kind}", exc))
            return
        app.emit(app.warehouse.service(kind).update(record_id, request))

    group.add_command(
        InvCommand(
            name="update",
            callback=update_callback,
            params=[
                click.Argument(["record_id"], type=_RECORD_ID),
                *_model_options(definition.update_model, required=False),
            ],
            help=f"Update a {kind}. Options left out keep their stored values.",
        )
    )

    @group.command(name="delete", help=f"Delete a {kind} permanently.")
    @click.argument("record_id", type=_RECORD_ID)
    @click.pass_obj
    def delete_cmd(app: AppContext, record_id: int) -> None:
        app.emit(app.warehouse.service(kind).delete(record_id))

    return group

