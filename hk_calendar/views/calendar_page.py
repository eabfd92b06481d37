"""
Server-rendered HTML for the monthly calendar page
"""
from html import escape
from typing import List, Optional, Tuple
from urllib.parse import urlencode

from hk_calendar.core.constants import LOCALE_EN, LOCALE_ZH
from hk_calendar.core.i18n import TRANSLATIONS, get_bundle, holiday_label
from hk_calendar.schemas.calendar import CalendarCell, MonthGrid

HTML_LANG = {LOCALE_ZH: "zh-Hant-HK", LOCALE_EN: "en"}


def month_url(year: int, month: int, locale: str) -> str:
    """Page URL for a 0-indexed month"""
    return "/?" + urlencode({"year": year, "month": month + 1, "lang": locale})


def render_nav_link(element_id: str, text: str, target: Optional[Tuple[int, int]], locale: str) -> str:
    if target is None:
        return f'<span id="{element_id}" class="nav-btn disabled" aria-disabled="true">{escape(text)}</span>'
    return f'<a id="{element_id}" class="nav-btn" href="{escape(month_url(*target, locale))}">{escape(text)}</a>'


def render_header_cells(locale: str) -> str:
    # Printed headers are always English
    print_headers = TRANSLATIONS[LOCALE_EN]["week_headers"]
    return "".join(
        f'<div class="header-cell" data-print="{escape(print_text)}">{escape(text)}</div>'
        for text, print_text in zip(get_bundle(locale)["week_headers"], print_headers)
    )


def render_cell(cell: CalendarCell, locale: str) -> str:
    if cell.is_padding:
        return '<div class="day-cell empty"></div>'

    classes = ["day-cell"]
    if cell.is_rest_day:
        classes.append("sunday")
    if cell.holiday is not None:
        classes.append("holiday")
    if cell.is_today:
        classes.append("today")

    parts = [f'<span class="day-number">{cell.day}</span>']
    if cell.holiday is not None:
        # Printed labels are always the Chinese name
        parts.append(
            f'<div class="holiday-label" data-print="{escape(cell.holiday.name_local)}">'
            f"{escape(holiday_label(cell.holiday, locale))}</div>"
        )
    return f'<div class="{" ".join(classes)}">{"".join(parts)}</div>'


def render_calendar_page(
    grid: MonthGrid,
    locale: str,
    prev_month: Optional[Tuple[int, int]],
    next_month: Optional[Tuple[int, int]],
) -> str:
    """
    Render the full calendar page

    Args:
        grid: Month grid to display
        locale: "zh" or "en"
        prev_month: (year, 0-indexed month) targeted by the Prev link, None to disable it
        next_month: (year, 0-indexed month) targeted by the Next link, None to disable it

    Returns:
        HTML document as a string
    """
    t = get_bundle(locale)
    cells: List[str] = [render_cell(cell, locale) for cell in grid.cells]

    return f"""<!DOCTYPE html>
<html lang="{HTML_LANG.get(locale, 'en')}">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{escape(t["page_title"])}</title>
<link rel="stylesheet" href="/static/calendar.css">
</head>
<body>
<div class="container">
  <div class="controls">
    {render_nav_link("prevBtn", t["prev"], prev_month, locale)}
    <h1 id="monthYearDisplay">{escape(grid.title)}</h1>
    {render_nav_link("nextBtn", t["next"], next_month, locale)}
    <button id="printBtn" type="button" onclick="window.print()">{escape(t["print"])}</button>
  </div>
  <div id="calendarHeader" class="calendar-header">{render_header_cells(locale)}</div>
  <div id="calendarGrid" class="calendar-grid">{"".join(cells)}</div>
</div>
</body>
</html>
"""
