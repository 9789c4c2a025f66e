#!/usr/bin/env python3
# src/generate_x_mcp/merge.py
"""
Capability merging - reconcile freshly fetched MCP descriptors with the
ones already stored in an OpenAPI document.

Fields a human curates in the document (tags, security, argument examples)
survive regeneration; everything else is taken from the server.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from .constants import ARGUMENT_CURATED_FIELDS, CURATED_FIELDS, KEY_ARGUMENTS, KEY_NAME

Descriptor = dict[str, Any]


def merge_collection(
    fresh: Sequence[Descriptor],
    prior: Iterable[Any] | None,
    curated_fields: Iterable[str],
) -> list[Descriptor]:
    """Merge one fresh descriptor list against the prior list of the same kind.

    Args:
        fresh: Descriptors just returned by the server, in server order.
        prior: Descriptors from the previously loaded document, or None.
            Entries that are not mappings are skipped.
        curated_fields: Field names owned by the document author.

    Returns:
        One record per fresh descriptor, in the same order. Records matched by
        name in ``prior`` carry the prior values of the curated fields; a
        curated field the prior record lacks is left out. Prior records with
        no fresh counterpart are dropped.
    """
    curated = tuple(curated_fields)
    existing = {record.get(KEY_NAME): record for record in prior or () if isinstance(record, dict)}

    merged: list[Descriptor] = []
    for record in fresh:
        previous = existing.get(record.get(KEY_NAME))
        result = dict(record)
        if previous is not None:
            for field in curated:
                if field in previous:
                    result[field] = previous[field]
                else:
                    result.pop(field, None)
        merged.append(result)
    return merged


def merge_tools(fresh: Sequence[Descriptor], prior: Iterable[Any] | None) -> list[Descriptor]:
    """Merge tool descriptors, preserving tags and security."""
    return merge_collection(fresh, prior, CURATED_FIELDS)


def merge_resources(fresh: Sequence[Descriptor], prior: Iterable[Any] | None) -> list[Descriptor]:
    """Merge resource descriptors, preserving tags and security."""
    return merge_collection(fresh, prior, CURATED_FIELDS)


def merge_prompts(fresh: Sequence[Descriptor], prior: Iterable[Any] | None) -> list[Descriptor]:
    """Merge prompt descriptors.

    Each prompt's ``arguments`` are merged by name first, keeping argument
    ``example`` values, then the prompt-level tags and security are applied.
    """
    existing = {record.get(KEY_NAME): record for record in prior or () if isinstance(record, dict)}

    with_arguments: list[Descriptor] = []
    for prompt in fresh:
        if KEY_ARGUMENTS in prompt and prompt[KEY_ARGUMENTS] is not None:
            previous = existing.get(prompt.get(KEY_NAME)) or {}
            prior_arguments = previous.get(KEY_ARGUMENTS)
            prompt = dict(prompt)
            prompt[KEY_ARGUMENTS] = merge_collection(
                prompt[KEY_ARGUMENTS],
                prior_arguments if isinstance(prior_arguments, list) else None,
                ARGUMENT_CURATED_FIELDS,
            )
        with_arguments.append(prompt)

    return merge_collection(with_arguments, prior, CURATED_FIELDS)


__all__ = [
    "Descriptor",
    "merge_collection",
    "merge_tools",
    "merge_prompts",
    "merge_resources",
]
