__all__ = ("remove_item",)


def remove_item[Element](
    items: list[Element],
    item: Element | int,
    /,
) -> bool:
    """
    Remove a single entry from a list in place.

    An ``int`` is treated as a position and removes that slot, any other value
    removes its first occurrence. Booleans are treated as values.

    Returns
    -------
    bool
        True when an entry was removed, False when the value was not present.

    Raises
    ------
    IndexError
        If a position was given and there is no item at it.
    """
    if isinstance(item, int) and not isinstance(item, bool):
        if not 0 <= item < len(items):
            raise IndexError(f"Item at index {item} is not present")

        del items[item]
        return True

    try:
        items.remove(item)  # pyright: ignore[reportArgumentType]

    except ValueError:
        return False

    return True
