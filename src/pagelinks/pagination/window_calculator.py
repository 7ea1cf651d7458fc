"""
Visible page number calculation.
"""

from pagelinks.models.errors import InvalidOptionsError
from pagelinks.models.options import WindowOptions


class WindowCalculator:
    """
    Windowed page number helper.

    Picks which page numbers are shown for a paginated collection:
    - an inner window of pages centered on the current page
    - an outer window of pages next to the first and the last page
    - everything between them, unless hiding it would save at least two pages

    Any break between consecutive numbers in the result is a gap.
    """

    @staticmethod
    def visible_page_numbers(
        current_page: int,
        total_pages: int,
        inner_window: int,
        outer_window: int,
    ) -> list[int]:
        """
        Calculate the visible page numbers.

        The inner window is shifted, never shrunk, when it runs into either
        end of the collection, so the number of pages shown stays stable
        while paging. A gap hiding a single page is never created: that page
        is shown instead.

        Args:
            current_page: Page being displayed (may be past the last page)
            total_pages: Number of pages in the collection
            inner_window: Pages shown on each side of the current page
            outer_window: Pages shown next to the first and the last page

        Returns:
            Ascending list of page numbers within 1..total_pages

        Raises:
            InvalidOptionsError: If a window size is negative

        Example:
            visible_page_numbers(10, 20, 2, 1)
            → [1, 2, 8, 9, 10, 11, 12, 19, 20]
        """
        if inner_window < 0 or outer_window < 0:
            raise InvalidOptionsError(
                message="inner_window and outer_window must not be negative",
                details={"inner_window": inner_window, "outer_window": outer_window},
            )

        window_from = current_page - inner_window
        window_to = current_page + inner_window

        # shift the window back inside 1..total_pages
        if window_to > total_pages:
            window_from -= window_to - total_pages
            window_to = total_pages
        if window_from < 1:
            window_to += 1 - window_from
            window_from = 1
            window_to = min(window_to, total_pages)

        # half-open ranges of hidden pages on each side of the inner window
        left_gap = range(2 + outer_window, window_from)
        right_gap = range(window_to + 1, total_pages - outer_window)

        visible: list[int] = []
        next_page = 1
        for gap in (left_gap, right_gap):
            if gap.stop - gap.start > 1:
                visible.extend(range(next_page, gap.start))
                next_page = gap.stop
        visible.extend(range(next_page, total_pages + 1))

        return visible

    @classmethod
    def for_options(
        cls,
        current_page: int,
        total_pages: int,
        options: WindowOptions,
    ) -> list[int]:
        return cls.visible_page_numbers(
            current_page,
            total_pages,
            options.inner_window,
            options.outer_window,
        )
