"""Terminal preview of an OverlayFrame using rich.

A stand-in for the real browser overlay: lets an operator check what the
audience would see for a given snapshot.
"""

from __future__ import annotations

from rich.align import Align
from rich.columns import Columns
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from roundcast.content import ContentView
from roundcast.overview import KnockoutView, LeaderboardRow, OverlayFrame
from roundcast.reveal import RevealView

BAR_WIDTH = 30
PITCH_WIDTH = 41
HIDDEN_TILE = "\U0001F512"


def make_bar(ratio: float, color: str, width: int = BAR_WIDTH) -> Text:
    """Render a proportional bar."""
    filled = int(max(0.0, min(1.0, ratio)) * width)
    bar = Text()
    bar.append("█" * filled, style=f"bold {color}")
    bar.append("░" * (width - filled), style="dim")
    return bar


def format_letters(view: RevealView | None) -> Text:
    if view is None or not view.total_units:
        return Text("")
    out = Text()
    for g, group in enumerate(view.groups):
        if g > 0:
            out.append("   ")
        for iu in group:
            if iu.visible:
                out.append(f"[{iu.unit.value}]", style="bold yellow")
            else:
                out.append(f"[{HIDDEN_TILE}]", style="dim")
    if view.show_clue_hint:
        out.append(f"\nClue: {view.revealed_count}/{view.total_units}", style="italic cyan")
    return out


def format_flag_overlay(view: ContentView) -> Text | None:
    overlay = view.flag_overlay
    if overlay is None or not overlay.active:
        return None
    side = int(len(overlay.regions) ** 0.5) or 1
    out = Text()
    for i, covered in enumerate(overlay.regions):
        out.append("?" if covered else "·", style="dim" if covered else "green")
        if (i + 1) % side == 0 and i + 1 < len(overlay.regions):
            out.append("\n")
    return out


def build_content(view: ContentView | None) -> Panel:
    if view is None or not view.available:
        return Panel(Text("-- waiting for question --", style="dim italic"), border_style="dim")
    parts = []
    if view.heading:
        parts.append(Text(view.heading, style="bold white"))
    if view.flag_code:
        parts.append(Text(f"flag: {view.flag_code}", style="cyan"))
    flag = format_flag_overlay(view)
    if flag is not None:
        parts.append(flag)
    if view.letter:
        parts.append(Text(view.letter, style="bold yellow"))
    parts.append(format_letters(view.letters))
    if view.answer:
        answer = Text("Answer: ", style="green")
        answer.append(view.answer, style="bold green")
        if view.answer_detail:
            answer.append(f" ({view.answer_detail})", style="dim")
        parts.append(answer)
    return Panel(
        Group(*(Align.center(p) for p in parts)),
        title=f"[bold]{view.kind.value}[/bold]",
        border_style="green",
    )


def build_pitch(ko: KnockoutView, round_active: bool) -> Panel:
    slot = round(ko.ball.horizontal_position / 100 * (PITCH_WIDTH - 1))
    pitch = Text()
    pitch.append("|")
    for i in range(PITCH_WIDTH):
        pitch.append("o" if i == slot else "-", style="bold white" if i == slot else "green")
    pitch.append("|")

    score = Text()
    for badge, color in ((ko.player1, "red"), (ko.player2, "blue")):
        if score:
            score.append("  -  ", style="dim")
        style = f"bold {color}"
        if badge.is_defender:
            style += " reverse"
        marker = "*" if badge.is_attacker else ""
        score.append(f"{marker}{badge.display_name} {badge.points}", style=style)

    parts = [Align.center(score), Align.center(pitch)]
    if ko.commentary:
        parts.append(Align.center(Text(ko.commentary, style="italic")))
    if round_active:
        banner = Text("TO ANSWER: ", style="bold yellow")
        banner.append(ko.defender_name or "...", style="bold white on red")
        parts.append(Align.center(banner))
    if ko.question is not None:
        parts.append(build_content(ko.question))
    return Panel(Group(*parts), title=f"[bold]{ko.ball.action.value}[/bold]", border_style="green")


def build_top_list(title: str, rows: tuple[LeaderboardRow, ...], empty: str) -> Panel:
    if not rows:
        return Panel(Text(empty, style="dim italic"), title=title)
    table = Table(show_header=False, show_edge=False, pad_edge=False, expand=True)
    table.add_column(width=3)
    table.add_column()
    table.add_column(justify="right")
    for rank, row in enumerate(rows, 1):
        table.add_row(str(rank), Text(row.display_name), str(row.score))
    return Panel(table, title=title)


def build_header(frame: OverlayFrame) -> Panel:
    top = Text()
    top.append(frame.header, style="dim")
    top.append("  |  ", style="dim")
    top.append(frame.title, style="bold white")

    timer_color = "red" if frame.timer.urgent else "yellow"
    timer = make_bar(frame.timer.remaining_ratio, timer_color)
    timer.append(f" {frame.timer.remaining:.0f}s", style=f"bold {timer_color}")

    rounds = make_bar(frame.rounds.ratio, "red" if frame.rounds.indeterminate else "cyan")
    return Panel(
        Group(Align.center(top), Align.center(rounds), Align.center(timer)),
        border_style="bright_white" if frame.round_active else "green",
        padding=(0, 1),
    )


def build_footer(frame: OverlayFrame) -> Text:
    footer = Text()
    if frame.knockout is None and frame.winners_quota:
        footer.append(f" Winners {frame.winners_found}/{frame.winners_quota} ", style="bold white on green")
    for w in frame.warnings:
        footer.append(f"  ! {w}", style="yellow")
    return footer


def render(frame: OverlayFrame) -> Group:
    board = Columns(
        [
            build_top_list("LIKES", frame.top_likers, "No likes yet."),
            build_top_list("GIFTS", frame.top_gifters, "No gifts yet."),
        ],
        expand=True,
    )
    body = (
        build_pitch(frame.knockout, frame.round_active)
        if frame.knockout is not None
        else build_content(frame.content)
    )
    return Group(build_header(frame), board, body, build_footer(frame))
