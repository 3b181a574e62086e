"""Rich rendering for the current route.

Three regions, each a pure function of AppState:

    render_header  server tabs, domain tabs, loading / server status
    render_body    the active main tab's screen (always drawn)
    render_popup   the current route when it is not a main tab; a route whose
                   context is itself a popup is drawn stacked on it (depth 2)
    render_footer  key help, then the error slot

Screens are looked up by block member NAME, so one renderer serves both
domains wherever the two enumerations share a member.

Rendering never mutates state. The one exception, the marquee, lives in
``advance_marquee`` and is called by the UI tick, not by a render.

// [LAW:one-source-of-truth] Which collection or field a block shows is asked
//   of the data container (``focused_collection``, ``focused_input``), the
//   same lookup the key handlers use, so highlight and scroll agree. Handler
//   classes are read for their block tables only; none is instantiated here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from servarr_tui.app.key_bindings import (
    CONFIRMATION_PROMPT_CLUES,
    GLOBAL_CLUES,
    SEARCH_FILTER_CLUES,
    build_context_clue_string,
)
from servarr_tui.handlers.library import LibraryTableHandler
from servarr_tui.handlers.routing import handler_for
from servarr_tui.handlers.wizard import WizardHandler
from servarr_tui.models.route import Route
from servarr_tui.models.servarr_models import convert_runtime, convert_to_gb
from servarr_tui.models.stateful import ScrollableText, StatefulList
from servarr_tui.models.text import HorizontallyScrollableText

if TYPE_CHECKING:
    from servarr_tui.app.state import AppState
    from servarr_tui.models.servarr_data.servarr_data import ServarrData

logger = logging.getLogger(__name__)

# Cell width of marquee title columns.
TITLE_WIDTH = 40

SELECTED = "reverse"
ACCENT = "bold cyan"
MUTED = "grey50"
ERROR = "bold red"
SUCCESS = "green"
WARNING = "yellow"

Screen = Callable[["AppState", "ServarrData", int], RenderableType]


# ─── Helpers ─────────────────────────────────────────────────────────────


def prompts_of(route: Route) -> dict[str, str]:
    handler = handler_for(route.block)
    return handler.PROMPTS if handler is not None else {}


def window(length: int, selected: int | None, rows: int) -> range:
    """Indices of the ``rows`` items to show, keeping ``selected`` in view."""
    rows = max(rows, 1)
    if length <= rows:
        return range(length)
    anchor = selected or 0
    start = max(0, min(anchor - rows // 2, length - rows))
    return range(start, start + rows)


def yes_no(value: bool) -> Text:
    return Text("yes", style=SUCCESS) if value else Text("no", style=MUTED)


def size_gb(size: int) -> str:
    return f"{convert_to_gb(size):.2f} GB"


def runtime(minutes: int) -> str:
    hours, mins = convert_runtime(minutes)
    return f"{hours}h {mins}m"


def title_cell(title: HorizontallyScrollableText, is_selected: bool) -> str:
    if is_selected:
        return title.marquee_view()[:TITLE_WIDTH]
    return title.text


def _title_of(item: object) -> HorizontallyScrollableText | None:
    for attr in ("title", "source_title"):
        value = getattr(item, attr, None)
        if isinstance(value, HorizontallyScrollableText):
            return value
    return None


def stateful_table(
    items: StatefulList,
    columns: Sequence[tuple[str, dict]],
    row: Callable[[object, bool], Sequence[RenderableType]],
    rows: int,
    empty: str = "Nothing to show",
    loading: bool = False,
) -> RenderableType:
    """A Rich table over the visible window of ``items``; the selection is reversed."""
    if items.is_empty():
        return Text("Loading ..." if loading else empty, style=MUTED)
    table = Table(box=box.SIMPLE_HEAD, expand=True, show_edge=False, pad_edge=False)
    for header, options in columns:
        table.add_column(header, no_wrap=True, overflow="ellipsis", **options)
    for index in window(len(items), items.selected, rows - 2):
        is_selected = index == items.selected
        table.add_row(*row(items.items[index], is_selected), style=SELECTED if is_selected else None)
    return table


def scrolled_text(text: ScrollableText, rows: int) -> Text:
    return Text("\n".join(text.items[text.offset: text.offset + max(rows, 1)]))


def popup(body: RenderableType, title: str, style: str = ACCENT) -> Panel:
    return Panel(body, title=title, border_style=style, box=box.ROUNDED)


def input_box(text: HorizontallyScrollableText | None, title: str) -> Panel:
    value = text.text if text is not None else ""
    caret = text.caret if text is not None else 0
    line = Text(value[:caret])
    line.append(value[caret:caret + 1] or " ", style=SELECTED)
    line.append(value[caret + 1:])
    return popup(line, title)


def confirm_buttons(is_confirmed: bool) -> Text:
    return Text.assemble(
        ("  Yes  ", SELECTED if is_confirmed else ""),
        "    ",
        ("  No  ", "" if is_confirmed else SELECTED),
    )


def _selected_text(items: StatefulList, attr: str) -> str:
    item = items.current_selection()
    return str(getattr(item, attr, "")) if item is not None else ""


# ─── Header / footer ─────────────────────────────────────────────────────


def tab_bar(titles: Sequence[str], active: int) -> Text:
    line = Text()
    for index, title in enumerate(titles):
        if index:
            line.append(" │ ", style=MUTED)
        line.append(title, style=ACCENT if index == active else "")
    return line


def render_header(app: AppState) -> RenderableType:
    data = app.data_for(app.domain)
    servers = tab_bar([tab.title for tab in app.server_tabs.tabs], app.server_tabs.index)
    tabs = tab_bar([tab.title for tab in data.main_tabs.tabs], data.main_tabs.index)

    status = Text()
    if app.is_loading:
        status.append("Loading ...", style=WARNING)
    elif data.version:
        status.append(f"{app.domain.title} v{data.version}", style=MUTED)
    for disk in data.disk_space:
        status.append(f"  {size_gb(disk.free_space)} free / {size_gb(disk.total_space)}", style=MUTED)

    grid = Table.grid(expand=True)
    grid.add_column()
    grid.add_column(justify="right")
    grid.add_row(servers, status)
    grid.add_row(tabs, "")
    return grid


def help_text(app: AppState) -> str:
    route = app.get_current_route()
    data = app.data_for(app.domain)
    if route.block.name in prompts_of(route):
        return build_context_clue_string(CONFIRMATION_PROMPT_CLUES)
    if data.focused_input(route.block) is not None:
        return build_context_clue_string(SEARCH_FILTER_CLUES)

    clues = [build_context_clue_string(GLOBAL_CLUES)]
    if route.block in _movie_info_blocks(app):
        tabs = app.radarr_data.movie_info_tabs
        clues = [tabs.get_active_tab_help()]
        if tabs.get_active_tab_contextual_help():
            clues.append(tabs.get_active_tab_contextual_help())
    elif route.block.name in ("SERIES_DETAILS", "SEASON_DETAILS"):
        clues = [app.sonarr_data.series_details_help]
    elif route == data.main_tabs.get_active_route():
        contextual = data.main_tabs.get_active_tab_contextual_help()
        if contextual:
            clues.append(contextual)
    return " | ".join(clue for clue in clues if clue)


def _movie_info_blocks(app: AppState) -> set:
    return {tab.route.block for tab in app.radarr_data.movie_info_tabs.tabs}


def render_footer(app: AppState) -> RenderableType:
    lines = [Text(help_text(app), style=MUTED)]
    if not app.error.is_empty():
        lines.append(Text(app.error.marquee_view(), style=ERROR))
    return Group(*lines)


# ─── Main tab screens ────────────────────────────────────────────────────


def _tags(data: ServarrData, tag_ids: list[int]) -> str:
    return data.tag_labels(tag_ids)


def movies_screen(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    profiles = data.quality_profile_map

    def row(movie, selected):
        return (
            title_cell(movie.title, selected),
            str(movie.year),
            runtime(movie.runtime),
            size_gb(movie.size_on_disk),
            profiles.get(movie.quality_profile_id, ""),
            movie.minimum_availability.display,
            yes_no(movie.monitored),
            _tags(data, movie.tags),
        )

    return stateful_table(
        data.movies_view(),
        [
            ("Title", {"width": TITLE_WIDTH}),
            ("Year", {}),
            ("Runtime", {}),
            ("Size", {}),
            ("Quality Profile", {}),
            ("Availability", {}),
            ("Monitored", {}),
            ("Tags", {}),
        ],
        row,
        rows,
        empty="No movies",
        loading=app.is_loading,
    )


def collections_screen(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    profiles = data.quality_profile_map

    def row(collection, selected):
        return (
            title_cell(collection.title, selected),
            str(len(collection.movies)),
            collection.root_folder_path,
            profiles.get(collection.quality_profile_id, ""),
            yes_no(collection.search_on_add),
            yes_no(collection.monitored),
        )

    return stateful_table(
        data.collections_view(),
        [
            ("Collection", {"width": TITLE_WIDTH}),
            ("Movies", {}),
            ("Root Folder", {}),
            ("Quality Profile", {}),
            ("Search On Add", {}),
            ("Monitored", {}),
        ],
        row,
        rows,
        empty="No collections",
        loading=app.is_loading,
    )


def series_screen(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    profiles = data.quality_profile_map

    def row(series, selected):
        return (
            title_cell(series.title, selected),
            str(series.year),
            series.network,
            str(len(series.seasons)),
            series.status,
            profiles.get(series.quality_profile_id, ""),
            yes_no(series.monitored),
            _tags(data, series.tags),
        )

    return stateful_table(
        data.series_view(),
        [
            ("Title", {"width": TITLE_WIDTH}),
            ("Year", {}),
            ("Network", {}),
            ("Seasons", {}),
            ("Status", {}),
            ("Quality Profile", {}),
            ("Monitored", {}),
            ("Tags", {}),
        ],
        row,
        rows,
        empty="No series",
        loading=app.is_loading,
    )


def downloads_screen(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    def row(download, selected):
        return (
            title_cell(download.title, selected),
            f"{download.progress:.0%}",
            size_gb(download.size),
            download.status,
            download.output_path,
            download.indexer,
            download.download_client,
        )

    return stateful_table(
        data.downloads,
        [
            ("Title", {"width": TITLE_WIDTH}),
            ("Progress", {}),
            ("Size", {}),
            ("Status", {}),
            ("Output Path", {}),
            ("Indexer", {}),
            ("Download Client", {}),
        ],
        row,
        rows,
        empty="No downloads",
    )


def blocklist_screen(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    def row(item, selected):
        return (title_cell(item.source_title, selected), item.protocol, item.indexer, item.date)

    return stateful_table(
        data.blocklist,
        [("Source Title", {"width": TITLE_WIDTH}), ("Protocol", {}), ("Indexer", {}), ("Date", {})],
        row,
        rows,
        empty="Blocklist is empty",
    )


def root_folders_screen(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    def row(folder, selected):
        return (folder.path, size_gb(folder.free_space), yes_no(folder.accessible))

    return stateful_table(
        data.root_folders,
        [("Path", {"ratio": 3}), ("Free Space", {}), ("Accessible", {})],
        row,
        rows,
        empty="No root folders",
    )


def indexers_screen(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    def row(indexer, selected):
        return (
            indexer.name,
            indexer.protocol.value,
            yes_no(indexer.enable_rss),
            yes_no(indexer.enable_automatic_search),
            yes_no(indexer.enable_interactive_search),
            str(indexer.priority),
            _tags(data, indexer.tags),
        )

    return stateful_table(
        data.indexers,
        [
            ("Indexer", {"ratio": 2}),
            ("Protocol", {}),
            ("RSS", {}),
            ("Automatic Search", {}),
            ("Interactive Search", {}),
            ("Priority", {}),
            ("Tags", {}),
        ],
        row,
        rows,
        empty="No indexers",
    )


def tasks_table(data: ServarrData, rows: int) -> RenderableType:
    def row(task, selected):
        return (task.name, f"{task.interval}m", task.last_execution, task.next_execution)

    return stateful_table(
        data.tasks,
        [("Name", {"ratio": 2}), ("Interval", {}), ("Last Execution", {}), ("Next Execution", {})],
        row,
        rows,
        empty="No tasks",
    )


def queued_events_table(data: ServarrData, rows: int) -> RenderableType:
    def row(event, selected):
        return (event.name or event.command_name, event.status, event.queued, event.duration)

    return stateful_table(
        data.queued_events,
        [("Name", {"ratio": 2}), ("Status", {}), ("Queued", {}), ("Duration", {})],
        row,
        rows,
        empty="No queued events",
    )


def logs_view(data: ServarrData, rows: int, follow_selection: bool) -> RenderableType:
    logs = data.logs
    if logs.is_empty():
        return Text("No logs", style=MUTED)
    selected = logs.selected if follow_selection else len(logs) - 1
    lines = Text()
    for index in window(len(logs), selected, rows):
        line = logs.items[index]
        style = SELECTED if follow_selection and index == logs.selected else ""
        lines.append(line.text[line.offset:] + "\n", style=style)
    return lines


def system_screen(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    third = max(rows // 3, 3)
    return Group(
        popup(tasks_table(data, third), "Tasks", MUTED),
        popup(queued_events_table(data, third), "Queued Events", MUTED),
        popup(logs_view(data, third, follow_selection=False), "Logs", MUTED),
    )


BODY_SCREENS: dict[str, Screen] = {
    "MOVIES": movies_screen,
    "COLLECTIONS": collections_screen,
    "SERIES": series_screen,
    "DOWNLOADS": downloads_screen,
    "BLOCKLIST": blocklist_screen,
    "ROOT_FOLDERS": root_folders_screen,
    "INDEXERS": indexers_screen,
    "SYSTEM": system_screen,
}


def render_body(app: AppState, rows: int) -> RenderableType:
    data = app.data_for(app.domain)
    block = data.main_tabs.get_active_route().block
    screen = BODY_SCREENS.get(block.name)
    if screen is None:
        logger.warning("no screen for %s", block)
        return Text("")
    return screen(app, data, rows)


# ─── Popups ──────────────────────────────────────────────────────────────

# prompt block name → (title, message)
PROMPT_TEXT: dict[str, tuple[str, Callable[[AppState, ServarrData], str]]] = {
    "DELETE_DOWNLOAD_PROMPT": (
        "Cancel Download",
        lambda app, d: f"Do you really want to delete this download:\n{_selected_text(d.downloads, 'title')}?",
    ),
    "UPDATE_DOWNLOADS_PROMPT": ("Update Downloads", lambda app, d: "Do you want to update your downloads?"),
    "DELETE_BLOCKLIST_ITEM_PROMPT": (
        "Remove from Blocklist",
        lambda app, d: f"Do you want to remove this item from your blocklist:\n{_selected_text(d.blocklist, 'source_title')}?",
    ),
    "BLOCKLIST_CLEAR_ALL_ITEMS_PROMPT": (
        "Clear Blocklist",
        lambda app, d: "Do you want to clear your blocklist?",
    ),
    "DELETE_ROOT_FOLDER_PROMPT": (
        "Delete Root Folder",
        lambda app, d: f"Do you really want to delete this root folder:\n{_selected_text(d.root_folders, 'path')}?",
    ),
    "DELETE_INDEXER_PROMPT": (
        "Delete Indexer",
        lambda app, d: f"Do you really want to delete this indexer:\n{_selected_text(d.indexers, 'name')}?",
    ),
    "SYSTEM_TASK_START_CONFIRM_PROMPT": (
        "Start Task",
        lambda app, d: f"Do you want to manually start this task: {_selected_text(d.tasks, 'name')}?",
    ),
    "UPDATE_ALL_MOVIES_PROMPT": (
        "Update All Movies",
        lambda app, d: "Do you want to update info and scan your disks for all of your movies?",
    ),
    "UPDATE_ALL_COLLECTIONS_PROMPT": (
        "Update All Collections",
        lambda app, d: "Do you want to update all of your collections?",
    ),
    "AUTOMATICALLY_SEARCH_MOVIE_PROMPT": (
        "Automatic Movie Search",
        lambda app, d: f"Do you want to trigger an automatic search of your indexers for the movie:\n{_selected_text(d.movies_view(), 'title')}?",
    ),
    "UPDATE_AND_SCAN_PROMPT": (
        "Update and Scan",
        lambda app, d: f"Do you want to trigger an update and disk scan for the movie:\n{_selected_text(d.movies_view(), 'title')}?",
    ),
    "MANUAL_SEARCH_CONFIRM_PROMPT": (
        "Download Release",
        lambda app, d: "Do you want to download the following release:\n"
        + (_selected_text(d.movie_details_modal.movie_releases, "title") if d.movie_details_modal else "")
        + "?",
    ),
    "UPDATE_ALL_SERIES_PROMPT": (
        "Update All Series",
        lambda app, d: "Do you want to update info and scan your disks for all of your series?",
    ),
    "AUTOMATICALLY_SEARCH_SERIES_PROMPT": (
        "Automatic Series Search",
        lambda app, d: f"Do you want to trigger an automatic search of your indexers for the series:\n{_selected_text(d.series_view(), 'title')}?",
    ),
}

WIZARD_TITLES = {
    "ADD_MOVIE_PROMPT": "Add Movie",
    "EDIT_MOVIE_PROMPT": "Edit Movie",
    "EDIT_COLLECTION_PROMPT": "Edit Collection",
    "DELETE_MOVIE_PROMPT": "Delete Movie",
    "DELETE_SERIES_PROMPT": "Delete Series",
    "EDIT_INDEXER_PROMPT": "Edit Indexer",
}

# form attribute → label, where the attribute name does not read well
FIELD_LABELS = {
    "root_folder_list": "Root Folder",
    "monitor_list": "Monitor",
    "minimum_availability_list": "Minimum Availability",
    "quality_profile_list": "Quality Profile",
    "enable_rss": "Enable RSS",
    "url": "URL",
    "api_key": "API Key",
    "delete_movie_files": "Delete Movie File",
    "delete_series_files": "Delete Series Files",
}


def field_label(attr: str) -> str:
    return FIELD_LABELS.get(attr, attr.replace("_", " ").title())


def choice_text(item: object) -> str:
    if item is None:
        return ""
    display = getattr(item, "display", None)
    if isinstance(display, str):
        return display
    path = getattr(item, "path", None)
    if isinstance(path, str):
        return path
    return str(item)


def prompt_popup(app: AppState, data: ServarrData, name: str) -> RenderableType:
    title, message = PROMPT_TEXT.get(name, ("Confirm", lambda app, d: "Are you sure?"))
    return popup(
        Group(Text(message(app, data), justify="center"), Text(""), confirm_buttons(data.pending.is_confirmed)),
        title,
    )


def wizard_form(data: ServarrData, handler: type[WizardHandler]) -> RenderableType:
    form = handler.form_of(data)
    selection = data.selected_block
    if form is None or selection is None:
        return Text("")
    active = selection.get_active_block()
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right")
    table.add_column()

    buttons: Text | None = None
    for step in selection.sequence.steps:
        for block in dict.fromkeys(step):
            is_active = block is active
            label_style = SELECTED if is_active else ""
            if block.name == handler.CONFIRM:
                buttons = confirm_buttons(data.pending.is_confirmed) if is_active else confirm_buttons(False)
                continue
            if block.name in handler.TOGGLES:
                attr = handler.TOGGLES[block.name]
                value: RenderableType = Text("[x]" if getattr(form, attr) else "[ ]")
            elif block.name in handler.SELECTS:
                attr = handler.SELECTS[block.name]
                value = Text(choice_text(getattr(form, attr).current_selection()))
            else:
                attr = handler.INPUTS[block.name]
                value = Text(getattr(form, attr).text)
            table.add_row(Text(field_label(attr), style=label_style), value)

    parts: list[RenderableType] = [table]
    if buttons is not None:
        parts += [Text(""), buttons]
    return popup(Group(*parts), WIZARD_TITLES.get(handler.PROMPT, "Edit"))


def choices_popup(data: ServarrData, handler: type[WizardHandler], route: Route, rows: int) -> RenderableType:
    choices = data.focused_collection(route.block)
    attr = handler.SELECTS[route.block.name]
    if choices is None:
        return Text("")
    lines = Text()
    for index in window(len(choices), choices.selected, rows):
        style = SELECTED if index == choices.selected else ""
        lines.append(choice_text(choices.items[index]) + "\n", style=style)
    return popup(lines, field_label(attr))


def movie_details_popup(app: AppState, data: ServarrData, rows: int, block_name: str) -> RenderableType:
    tabs = data.movie_info_tabs
    modal = data.movie_details_modal
    header = tab_bar([tab.title for tab in tabs.tabs], tabs.index)
    loading = app.is_loading
    if modal is None:
        return popup(header, "Movie Info")

    body: RenderableType
    if block_name == "MOVIE_DETAILS":
        body = scrolled_text(modal.movie_details, rows) if modal.movie_details.items else Text("Loading ...", style=MUTED)
    elif block_name == "FILE_INFO":
        if not modal.file_details:
            body = Text("No file" if not loading else "Loading ...", style=MUTED)
        else:
            body = Group(
                popup(Text(modal.file_details), "File", MUTED),
                popup(Text(modal.audio_details), "Audio", MUTED),
                popup(Text(modal.video_details), "Video", MUTED),
            )
    elif block_name == "MOVIE_HISTORY":
        body = stateful_table(
            modal.movie_history,
            [("Source Title", {"width": TITLE_WIDTH}), ("Event Type", {}), ("Quality", {}), ("Date", {})],
            lambda item, selected: (title_cell(item.source_title, selected), item.event_type, item.quality, item.date),
            rows,
            empty="No history",
            loading=loading,
        )
    elif block_name == "CAST":
        body = stateful_table(
            modal.movie_cast,
            [("Cast Member", {}), ("Character", {})],
            lambda credit, selected: (credit.person_name, credit.character),
            rows,
            loading=loading,
        )
    elif block_name == "CREW":
        body = stateful_table(
            modal.movie_crew,
            [("Crew Member", {}), ("Job", {}), ("Department", {})],
            lambda credit, selected: (credit.person_name, credit.job, credit.department),
            rows,
            loading=loading,
        )
    else:
        body = stateful_table(
            modal.movie_releases,
            [
                ("Title", {"width": TITLE_WIDTH}),
                ("Indexer", {}),
                ("Protocol", {}),
                ("Age", {}),
                ("Size", {}),
                ("Peers", {}),
                ("Rejected", {}),
            ],
            lambda release, selected: (
                title_cell(release.title, selected),
                release.indexer,
                release.protocol,
                f"{release.age} days",
                size_gb(release.size),
                "" if release.seeders is None else f"{release.seeders}/{release.leechers or 0}",
                Text("rejected", style=ERROR) if release.rejected else "",
            ),
            rows,
            empty="No releases",
            loading=loading,
        )
    return popup(Group(header, body), _selected_text(data.movies_view(), "title") or "Movie Info")


def _add_search_results(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    results = data.add_searched_movies
    if results is None:
        return popup(Text("Loading ...", style=MUTED), "Search Results")
    return popup(
        stateful_table(
            results,
            [("Title", {"width": TITLE_WIDTH}), ("Year", {}), ("Runtime", {}), ("Genres", {})],
            lambda movie, selected: (
                title_cell(movie.title, selected),
                str(movie.year),
                runtime(movie.runtime),
                ", ".join(movie.genres),
            ),
            rows,
            empty="No movies found",
        ),
        "Search Results",
    )


def _collection_details(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    collection = data.selected_collection()
    overview = Text(collection.overview if collection else "", style=MUTED)
    table = stateful_table(
        data.collection_movies,
        [("Title", {"width": TITLE_WIDTH}), ("Year", {}), ("Runtime", {}), ("Genres", {})],
        lambda movie, selected: (
            title_cell(movie.title, selected),
            str(movie.year),
            runtime(movie.runtime),
            ", ".join(movie.genres),
        ),
        rows - 4,
        empty="No movies in this collection",
    )
    return popup(Group(overview, table), str(collection.title) if collection else "Collection")


def _movie_overview(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    movie = data.collection_movies.current_selection()
    return popup(Text(movie.overview if movie else ""), "Overview")


def _blocklist_details(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    item = data.blocklist.current_selection()
    if item is None:
        return Text("")
    return popup(
        Text(f"Source Title: {item.source_title}\nProtocol: {item.protocol}\nIndexer: {item.indexer}\nDate: {item.date}"),
        "Details",
    )


def _test_indexer(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    if data.indexer_test_error is None:
        return popup(Text("Testing Indexer ...", style=WARNING), "Test Indexer")
    if data.indexer_test_error:
        return popup(Text(data.indexer_test_error, style=ERROR), "Error", ERROR)
    return popup(Text("Indexer test succeeded!", style=SUCCESS), "Test Indexer")


def _test_all_indexers(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    results = data.indexer_test_all_results
    if results is None:
        return popup(Text("Testing All Indexers ...", style=WARNING), "Test All Indexers")
    return popup(
        stateful_table(
            results,
            [("Indexer", {}), ("Pass/Fail", {}), ("Failure Messages", {"ratio": 3})],
            lambda result, selected: (
                result.name,
                Text("Pass", style=SUCCESS) if result.is_valid else Text("Fail", style=ERROR),
                "; ".join(result.failures),
            ),
            rows,
            empty="No indexers",
        ),
        "Test All Indexers",
    )


def _series_details(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    series = data.selected_series()
    table = stateful_table(
        data.seasons,
        [("Season", {}), ("Monitored", {}), ("Episodes", {}), ("Size", {})],
        lambda season, selected: (
            season.title,
            yes_no(season.monitored),
            f"{season.episode_file_count}/{season.episode_count}",
            size_gb(season.size_on_disk),
        ),
        rows - 4,
        empty="No seasons",
    )
    overview = Text(series.overview if series else "", style=MUTED)
    return popup(Group(overview, table), str(series.title) if series else "Series")


def _season_details(app: AppState, data: ServarrData, rows: int) -> RenderableType:
    season = data.seasons.current_selection()
    return popup(
        stateful_table(
            data.episodes,
            [("#", {}), ("Title", {"width": TITLE_WIDTH}), ("Air Date", {}), ("Monitored", {}), ("File", {})],
            lambda episode, selected: (
                str(episode.episode_number),
                title_cell(episode.title, selected),
                episode.air_date_utc,
                yes_no(episode.monitored),
                yes_no(episode.has_file),
            ),
            rows,
            empty="No episodes",
            loading=app.is_loading,
        ),
        season.title if season else "Season",
    )


POPUP_SCREENS: dict[str, Screen] = {
    "ADD_MOVIE_SEARCH_RESULTS": _add_search_results,
    "ADD_MOVIE_EMPTY_SEARCH_RESULTS": lambda app, d, rows: popup(
        Text("No movies found matching your query!", style=ERROR), "Error", ERROR
    ),
    "ADD_MOVIE_ALREADY_IN_LIBRARY": lambda app, d, rows: popup(
        Text("This film is already in your library", style=ERROR), "Error", ERROR
    ),
    "ADD_MOVIE_SEARCH_INPUT": lambda app, d, rows: input_box(d.add_movie_search, "Add Movie"),
    "COLLECTION_DETAILS": _collection_details,
    "VIEW_MOVIE_OVERVIEW": _movie_overview,
    "BLOCKLIST_ITEM_DETAILS": _blocklist_details,
    "ADD_ROOT_FOLDER_PROMPT": lambda app, d, rows: input_box(d.edit_root_folder, "Add Root Folder"),
    "TEST_INDEXER": _test_indexer,
    "TEST_ALL_INDEXERS": _test_all_indexers,
    "SYSTEM_TASKS": lambda app, d, rows: popup(tasks_table(d, rows), "Tasks"),
    "SYSTEM_QUEUED_EVENTS": lambda app, d, rows: popup(queued_events_table(d, rows), "Queued Events"),
    "SYSTEM_LOGS": lambda app, d, rows: popup(logs_view(d, rows, follow_selection=True), "Logs"),
    "SYSTEM_UPDATES": lambda app, d, rows: popup(scrolled_text(d.updates, rows), "Updates"),
    "SERIES_DETAILS": _series_details,
    "SEASON_DETAILS": _season_details,
}


def render_block(app: AppState, route: Route, rows: int) -> RenderableType | None:
    """One popup for ``route.block``, or None when it has nothing to draw."""
    data = app.data_for(app.domain)
    name = route.block.name
    handler = handler_for(route.block)

    if handler is not None and name in handler.PROMPTS:
        return prompt_popup(app, data, name)
    if route.block in _movie_info_blocks(app):
        return movie_details_popup(app, data, rows, name)
    if handler is not None and issubclass(handler, LibraryTableHandler):
        if name in (handler.SEARCH, handler.FILTER):
            label = "Search" if name == handler.SEARCH else "Filter"
            return input_box(data.focused_input(route.block), label)
        if name == handler.SEARCH_ERROR:
            return popup(Text("Search string not found!", style=ERROR), "Error", ERROR)
        if name == handler.FILTER_ERROR:
            return popup(Text("Filter does not match any items!", style=ERROR), "Error", ERROR)
    if handler is not None and issubclass(handler, WizardHandler):
        if name == handler.PROMPT:
            return wizard_form(data, handler)
        if name in handler.SELECTS:
            return choices_popup(data, handler, route, rows)
        if name in handler.INPUTS:
            return input_box(data.focused_input(route.block), field_label(handler.INPUTS[name]))
    screen = POPUP_SCREENS.get(name)
    if screen is not None:
        return screen(app, data, rows)
    return None


def render_popup(app: AppState, rows: int) -> RenderableType | None:
    route = app.get_current_route()
    data = app.data_for(app.domain)
    main_blocks = {tab.route.block for tab in data.main_tabs.tabs}
    if route.block in main_blocks:
        return None

    layers: list[RenderableType] = []
    if route.context is not None and route.context not in main_blocks:
        below = render_block(app, Route(route.context), rows // 2)
        if below is not None:
            layers.append(below)
    top = render_block(app, route, rows if not layers else rows // 2)
    if top is not None:
        layers.append(top)
    return Group(*layers) if layers else None


# ─── Marquee ─────────────────────────────────────────────────────────────


def advance_marquee(app: AppState) -> None:
    """Scroll the selected row's title of the table in focus by one step."""
    target = app.data_for(app.domain).focused_collection(app.get_current_route().block)
    if not isinstance(target, StatefulList):
        return
    for index, item in enumerate(target.items):
        title = _title_of(item)
        if title is not None:
            title.tick_marquee(TITLE_WIDTH, index == target.selected)
