"""Attribute metadata — the registration table the engine reads targets through.

Instead of reflecting over arbitrary objects at validation time, each
validated type registers its ordered fields up front:

    registry.register(Order, [
        FieldSpec(name="code", descriptor=ConstraintDescriptor(nullable=False, size=4)),
        FieldSpec(name="qty", declared_type=int, descriptor=ConstraintDescriptor(min_value=1)),
    ])

Pydantic models can be registered from their own field declarations with
``register_model`` / the ``constrained`` decorator. A target may also expose
its specs itself through a ``field_specs()`` method.

Reading an attribute is fail-open: if the accessor raises, the value is
treated as absent (``None``) and validation carries on. That is what the
Mandatory rule then sees. The same holds for a raising ``field_specs()``.
"""

from collections.abc import Callable, Iterator
from typing import Any, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict

from fieldcheck.logging_config import get_logger
from fieldcheck.validators.models import ConstraintDescriptor

logger = get_logger(__name__)


class FieldSpec(BaseModel):
    """One registered attribute of a validated type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    descriptor: Optional[ConstraintDescriptor] = None
    alias: Optional[str] = None          # Display name override for messages
    declared_type: Any = None            # Gates numeric range checks
    accessor: Optional[Callable[[Any], Any]] = None

    @property
    def resolved_name(self) -> str:
        return self.alias or self.name

    def read(self, target: Any) -> Optional[Any]:
        """Current value of the attribute, or None if it cannot be read."""
        try:
            if self.accessor is not None:
                return self.accessor(target)
            return getattr(target, self.name)
        except Exception as e:
            logger.debug(
                "attribute_read_failed",
                target_type=type(target).__name__,
                attribute=self.name,
                error=str(e),
            )
            return None


class AttributeReading(NamedTuple):
    """What the rule chain sees for one descriptor-bearing attribute."""

    name: str
    value: Any
    descriptor: ConstraintDescriptor
    declared_type: Any = None


class ConstraintRegistry:
    """Maps each validated type to its ordered list of field specs."""

    def __init__(self):
        self._fields: dict[type, tuple[FieldSpec, ...]] = {}

    def register(self, target_type: type, fields: list[FieldSpec]) -> None:
        """Register (or replace) the ordered field list for a type."""
        self._fields[target_type] = tuple(fields)
        logger.debug(
            "constraints_registered",
            target_type=target_type.__name__,
            fields=[f.name for f in fields],
        )

    def register_model(self, model_cls: type[BaseModel], **descriptors: ConstraintDescriptor) -> None:
        """Register a pydantic model from its declared fields.

        Fields keep the model's declaration order; the field annotation becomes
        the declared type and the field alias becomes the display name.

        Args:
            model_cls: Pydantic model class
            **descriptors: Constraint descriptor per field name

        Raises:
            ValueError: If a descriptor names a field the model does not declare
        """
        model_fields = model_cls.model_fields
        unknown = sorted(set(descriptors) - set(model_fields))
        if unknown:
            raise ValueError(
                f"{model_cls.__name__} has no field(s): {', '.join(unknown)}"
            )

        self.register(model_cls, [
            FieldSpec(
                name=name,
                descriptor=descriptors.get(name),
                alias=info.alias,
                declared_type=info.annotation,
            )
            for name, info in model_fields.items()
        ])

    def constrained(self, **descriptors: ConstraintDescriptor):
        """Class decorator form of ``register_model``."""
        def decorator(model_cls):
            self.register_model(model_cls, **descriptors)
            return model_cls
        return decorator

    def unregister(self, target_type: type) -> None:
        self._fields.pop(target_type, None)

    def is_registered(self, target_type: type) -> bool:
        return target_type in self._fields

    def fields_for(self, target: Any) -> tuple[FieldSpec, ...]:
        """Field specs for a target: its own ``field_specs()`` first, then the table.

        A raising ``field_specs()`` is fail-open like an attribute read: the
        target is treated as having no constrained fields.
        """
        own_specs = getattr(type(target), "field_specs", None)
        if callable(own_specs):
            try:
                return tuple(target.field_specs())
            except Exception as e:
                logger.warning(
                    "field_specs_failed",
                    target_type=type(target).__name__,
                    error=str(e),
                )
                return ()
        return self._fields.get(type(target), ())


def read_attributes(target: Any, registry: ConstraintRegistry) -> Iterator[AttributeReading]:
    """Yield readings for descriptor-bearing attributes in declaration order.

    Attributes without a descriptor are skipped and never read.
    """
    for spec in registry.fields_for(target):
        if spec.descriptor is None:
            continue
        yield AttributeReading(
            name=spec.resolved_name,
            value=spec.read(target),
            descriptor=spec.descriptor,
            declared_type=spec.declared_type,
        )


# Module-level default registry
default_registry = ConstraintRegistry()
