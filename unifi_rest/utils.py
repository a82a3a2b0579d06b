"""
Utility functions for decoding controller JSON into the package's models.
"""

import inspect
import dataclasses
import typing
from functools import lru_cache
from typing import Any, Dict, List, Type, Tuple, TypeVar

from .flex import FlexBool, FlexInt
from .logging import get_logger, log_extra_fields
from .exceptions import UnifiDataError

logger = get_logger(__name__)

T = TypeVar("T")


def get_api_field_mapping(model_class: Type) -> Dict[str, str]:
    """
    Create a mapping between API field names and model attribute names.

    Examines dataclass fields with metadata to find mappings between
    API field names (like 'user-num_sta') and Python attribute names (like 'user_num_sta').

    Args:
        model_class: The dataclass model to examine for field mappings

    Returns:
        Dictionary mapping UniFi API field names to Python model attribute names
    """
    if not dataclasses.is_dataclass(model_class):
        return {}

    field_mapping = {}

    for field in dataclasses.fields(model_class):
        if "unifi_api_field" in field.metadata:
            api_field_name = field.metadata["unifi_api_field"]
            field_mapping[api_field_name] = field.name

    return field_mapping


@lru_cache(maxsize=None)
def get_flex_fields(model_class: Type) -> Dict[str, Type]:
    """
    Find the fields of a model annotated as FlexInt or FlexBool.

    Args:
        model_class: The dataclass model to examine.

    Returns:
        Dictionary mapping attribute names to FlexInt or FlexBool.
    """
    flex_fields = {}
    for name, hint in typing.get_type_hints(model_class).items():
        candidates = typing.get_args(hint) or (hint,)
        for candidate in candidates:
            if candidate in (FlexInt, FlexBool):
                flex_fields[name] = candidate
                break

    return flex_fields


def map_api_data_to_model(
    data: Dict[str, Any], model_class: Type
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Maps API data to model fields, handling special field names and separating model fields from extra fields.

    Args:
        data: Input dictionary from API response
        model_class: The dataclass model to map data to

    Returns:
        Tuple containing (model_fields, extra_fields) where:
            - model_fields: Dictionary of fields that map to the model's attributes
            - extra_fields: Dictionary of extra fields that don't directly map to the model
    """
    signature = inspect.signature(model_class.__init__)
    valid_params = set(signature.parameters.keys())
    valid_params.discard("self")
    valid_params.discard("_extra_fields")

    field_map = get_api_field_mapping(model_class)

    model_fields = {}
    extra_fields = {}

    for api_key, value in data.items():
        mapped_key = None

        if api_key in valid_params:
            mapped_key = api_key

        elif api_key in field_map and field_map[api_key] in valid_params:
            mapped_key = field_map[api_key]

        if mapped_key is not None:
            model_fields[mapped_key] = value
        else:
            extra_fields[api_key] = value

    return model_fields, extra_fields


def decode_model(data: Dict[str, Any], model_class: Type[T], **overrides: Any) -> T:
    """
    Decode one JSON object into a model instance.

    Fields annotated FlexInt or FlexBool go through their tolerant decoder.
    Unknown keys land in the instance's ``_extra_fields``.

    Args:
        data: One decoded JSON object from the controller.
        model_class: The dataclass model to build.
        **overrides: Attribute values set regardless of the payload, e.g. site_name.

    Returns:
        The model instance.

    Raises:
        UnifiDecodeError: If a FlexInt field holds an object, array or boolean.
        UnifiDataError: If the payload is not an object or lacks a required field.
    """
    if not isinstance(data, dict):
        raise UnifiDataError(
            f"Cannot decode {type(data).__name__} into {model_class.__name__}"
        )

    model_fields, extra_fields = map_api_data_to_model(data, model_class)

    for name, flex_type in get_flex_fields(model_class).items():
        if name in model_fields:
            model_fields[name] = flex_type.from_value(model_fields[name])

    model_fields.update(overrides)

    try:
        instance = model_class(**model_fields)
    except TypeError as e:
        error_msg = f"Error creating {model_class.__name__} from data: {e}"
        logger.error(error_msg)
        raise UnifiDataError(error_msg) from e

    if hasattr(instance, "_extra_fields"):
        instance._extra_fields = extra_fields
        record_id = data.get("_id") or data.get("mac") or data.get("name") or "?"
        log_extra_fields(logger, model_class.__name__, str(record_id), extra_fields)

    return instance


def decode_models(
    items: List[Dict[str, Any]], model_class: Type[T], **overrides: Any
) -> List[T]:
    """Decode a list of JSON objects. The first failure aborts the whole list."""
    return [decode_model(item, model_class, **overrides) for item in items]
