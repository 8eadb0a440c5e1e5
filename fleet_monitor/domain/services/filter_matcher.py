"""
Dashboard filter predicates over classified cameras.

Literal status selectors mostly compare for equality, with two grouped
tabs: `offline` shows only bare offline cameras, `maintenance` shows
maintenance and maintenance_long_time but not the hold tab. Virtual
selectors combine a status set with one maintenance reason.
"""
# Standard library imports
from typing import Callable, Dict, FrozenSet, Tuple, Union

# Local application imports
from ...core.exceptions import InvalidFilterError
from ..constants import (
    ACTIVE_MAINTENANCE,
    ANY_MAINTENANCE,
    CameraStatus,
    FilterSelector,
)
from ..models.signals import ClassifiedCamera

_BETTER_VIEW_STATUSES: FrozenSet[CameraStatus] = ANY_MAINTENANCE | {CameraStatus.ONLINE}


def _has_less_images(camera: ClassifiedCamera) -> bool:
    return camera.has_low_images or camera.flags.low_images


def _has_memory_full(camera: ClassifiedCamera) -> bool:
    return camera.low_memory


# selector -> (allowed statuses, reason predicate)
_VIRTUAL_FILTERS: Dict[
    FilterSelector, Tuple[FrozenSet[CameraStatus], Callable[[ClassifiedCamera], bool]]
] = {
    FilterSelector.MAINTENANCE_LESS_IMAGES: (ACTIVE_MAINTENANCE, _has_less_images),
    FilterSelector.MAINTENANCE_PHOTO_DIRTY: (
        ACTIVE_MAINTENANCE,
        lambda camera: camera.flags.photo_dirty,
    ),
    FilterSelector.MAINTENANCE_BETTER_VIEW: (
        _BETTER_VIEW_STATUSES,
        lambda camera: camera.flags.better_view,
    ),
    FilterSelector.MAINTENANCE_WRONG_TIME: (
        ANY_MAINTENANCE,
        lambda camera: camera.flags.wrong_time,
    ),
    FilterSelector.MAINTENANCE_SHUTTER_EXPIRY: (
        ANY_MAINTENANCE,
        lambda camera: camera.shutter_expiry,
    ),
    FilterSelector.DEVICE_EXPIRED: (
        ACTIVE_MAINTENANCE,
        lambda camera: camera.device_expired,
    ),
    FilterSelector.MEMORY_FULL: (ACTIVE_MAINTENANCE, _has_memory_full),
}


def parse_selector(value: Union[str, FilterSelector, None]) -> FilterSelector:
    """
    Parse a selector string (case-insensitive); empty means `all`.

    Raises:
        InvalidFilterError: If the value is not a known selector
    """
    if isinstance(value, FilterSelector):
        return value
    normalized = (value or "").strip().lower() or FilterSelector.ALL.value
    try:
        return FilterSelector(normalized)
    except ValueError:
        raise InvalidFilterError(value) from None


def matches(camera: ClassifiedCamera, selector: Union[FilterSelector, str]) -> bool:
    """
    Return whether a classified camera belongs to the given dashboard filter.

    Args:
        camera: Classified camera (status plus derived reasons and raw flags)
        selector: Filter selector or selector string

    Returns:
        True if the camera is shown under this filter; False for an
        unknown selector string
    """
    try:
        selector = parse_selector(selector)
    except InvalidFilterError:
        return False

    if selector == FilterSelector.ALL:
        return True

    if selector == FilterSelector.MAINTENANCE:
        return camera.status in ACTIVE_MAINTENANCE

    virtual = _VIRTUAL_FILTERS.get(selector)
    if virtual is not None:
        statuses, predicate = virtual
        return camera.status in statuses and bool(predicate(camera))

    # Exact match for all other statuses, bare offline included
    return camera.status.value == selector.value
