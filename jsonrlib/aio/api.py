"""High-level async transform API for jsonrlib.

``transform`` is the public entry point of the transformation stage: it
decides whether to work on a copy, dispatches to the requested traversal
strategy, and returns the resulting tree.
"""

from typing import Any, Optional, Sequence, Union

from ..config import PrunePredicate, TransformOptions, TraversalOrder
from ..core.context import create_context
from ..core.node import clone_tree, is_array, is_primitive
from ..core.visitor import run_enter, run_exit
from .traverser import AsyncTransformTraverser, create_traverser


async def transform(
    root: Any,
    visitors: Sequence[Any],
    options: Optional[TransformOptions] = None,
    *,
    order: Union[TraversalOrder, str, None] = None,
    clone: Optional[bool] = None,
    prune: Optional[PrunePredicate] = None
) -> Any:
    """Apply visitors to a JSON tree.

    Args:
        root: Tree to transform (primitive, array or structured node)
        visitors: Visitors applied in list order at every node
        options: TransformOptions (or a dict of its fields); keyword
                 arguments override its fields
        order: Traversal order (default pre-order depth-first)
        clone: Work on a structural copy (default True). With False the caller's
               tree is mutated in place and must not be touched by anyone
               else until the transform completes.
        prune: Predicate checked before descending into a structured node

    Returns:
        The transformed tree. With cloning no dict or list is shared with
        the input; without cloning it is the input object unless the root
        itself was replaced.

    Raises:
        InvalidTraversalOrderError: If the order is unknown (raised before
                                    any visitor runs)
    """
    options = _merge_options(options, order, clone, prune)
    traversal_order = options.traversal_order

    tree = clone_tree(root) if options.clone else root

    # Nothing to apply: the (possibly cloned) tree is already the answer
    if not visitors:
        return tree

    traverser = create_traverser(traversal_order, visitors, prune=options.prune)
    return await _transform_root(tree, visitors, traverser)


async def _transform_root(node: Any, visitors: Sequence[Any], traverser: AsyncTransformTraverser) -> Any:
    """Transform one top-level value.

    Each element of a top-level array is transformed as a root of its own
    (depth 0, index 0) and written back into the array.
    """
    if is_primitive(node):
        return await _transform_primitive(node, visitors)

    if is_array(node):
        for i, element in enumerate(node):
            node[i] = await _transform_root(element, visitors, traverser)
        return node

    box = [node]
    await traverser.run(box)
    return box[0]


async def _transform_primitive(node: Any, visitors: Sequence[Any]) -> Any:
    """Apply visitors to a primitive root: enter, then exit.

    A primitive has no children, so no traversal strategy is involved and
    the exit phase runs regardless of the requested order.
    """
    context = create_context()

    result = await run_enter(visitors, node, context)
    if result.replaced:
        return result.node

    result = await run_exit(visitors, node, context)
    if result.replaced:
        return result.node
    return node


def _merge_options(
    options: Optional[TransformOptions],
    order: Union[TraversalOrder, str, None],
    clone: Optional[bool],
    prune: Optional[PrunePredicate]
) -> TransformOptions:
    if isinstance(options, dict):
        options = TransformOptions(**options)
    base = options or TransformOptions()
    return TransformOptions(
        order=base.order if order is None else order,
        clone=base.clone if clone is None else clone,
        prune=base.prune if prune is None else prune,
    )
