"""Terminal front end for the drill."""
import logging
import re
from pathlib import Path
from typing import Callable, Optional, Union

from phonicsdrill.app import PhonicsDrill
from phonicsdrill.models.drill_models import DrillState, SessionSummary, as_number
from phonicsdrill.services.icon_generator import generate_alien_svg

logger = logging.getLogger(__name__)

FULL_STAR = "★"
EMPTY_STAR = "☆"
ALIEN_MARK = "👾"


def render_stars(count: int, total: int = 3) -> str:
    return FULL_STAR * count + EMPTY_STAR * (total - count)


def icon_file_name(word: str, compact: bool = False) -> str:
    stem = re.sub(r"[^a-z0-9]+", "_", word.lower()).strip("_") or "alien"
    return f"{stem}-small.svg" if compact else f"{stem}.svg"


class DrillCli:
    """Menu, drill and results screens driven by line input."""

    def __init__(
        self,
        app: PhonicsDrill,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        icon_dir: Optional[Union[str, Path]] = None,
    ):
        self.app = app
        self.input = input_func
        self.output = output
        self.icon_dir = Path(icon_dir) if icon_dir is not None else None

    def save_icon(self, word: str, compact: bool = False) -> Optional[Path]:
        """Write the alien art of a word as SVG when an icon directory is set."""
        if self.icon_dir is None:
            return None
        self.icon_dir.mkdir(parents=True, exist_ok=True)
        path = self.icon_dir / icon_file_name(word, compact)
        path.write_text(generate_alien_svg(word, compact), encoding="utf-8")
        return path

    def confirm(self, question: str) -> bool:
        answer = self.input(f"{question} [y/N] ").strip().lower()
        return answer in ("y", "yes")

    def show_menu(self) -> None:
        levels = self.app.catalog.levels()
        if not levels:
            self.output("No levels available.")
            return
        max_score = self.app.store.max_score
        for level in levels:
            self.output(f"Level {level}")
            badges = self.app.progress.week_progress(level)
            if not badges:
                self.output("  No weeks available for this level.")
            for badge in badges:
                self.output(
                    f"  Week {badge.week} {render_stars(badge.stars, max_score)} (Progress: {badge.percent}%)"
                )

    def run(self) -> None:
        """Main menu loop."""
        while True:
            self.show_menu()
            command = self.input("Choose '<level> <week>', 'p' for practice test, 'reset' or 'q': ").strip().lower()
            if command in ("q", "quit", "exit"):
                return
            if command in ("p", "practice"):
                self.app.controller.start_practice()
                self.play()
            elif command == "reset":
                if self.confirm("Are you sure you want to remove ALL progress? This cannot be undone."):
                    self.app.controller.reset_all_progress()
                    self.output("All progress has been reset.")
            else:
                parts = command.split()
                if len(parts) != 2 or as_number(parts[0]) is None or as_number(parts[1]) is None:
                    self.output("Unknown command.")
                    continue
                self.app.controller.start_weekly(parts[0], parts[1])
                self.play()

    def play(self) -> None:
        """Drill the current session, then show the results screen."""
        controller = self.app.controller
        while controller.state is DrillState.AWAITING_JUDGMENT:
            word = controller.current_word
            position = f"{controller.current_index + 1}/{len(controller.session)}"
            mark = f" {ALIEN_MARK}" if controller.show_icon else ""
            if controller.show_icon:
                path = self.save_icon(word.word)
                if path is not None:
                    self.output(f"Alien art: {path}")
            answer = self.input(f"[{position}] {word.word}{mark}  right (y) / wrong (n) / quit (q): ").strip().lower()
            if answer in ("y", "yes"):
                controller.judge(True)
            elif answer in ("n", "no"):
                controller.judge(False)
            elif answer in ("q", "quit"):
                return
        self.results()

    def show_summary(self, summary: SessionSummary) -> None:
        if summary.total == 0:
            self.output("No words in this session.")
            return
        max_score = self.app.store.max_score
        for result in summary.results:
            mark = f" {ALIEN_MARK}" if result.show_icon else ""
            self.output(f"{result.record.word} {render_stars(result.score, max_score)}{mark}")
            if result.show_icon:
                path = self.save_icon(result.record.word, compact=True)
                if path is not None:
                    self.output(f"  {path}")
        self.output(f"You got {summary.correct_count} out of {summary.total} correct!")

    def results(self) -> None:
        """Finished screen with replay and reset actions."""
        controller = self.app.controller
        while True:
            self.show_summary(self.app.progress.session_summary(controller.session))
            command = self.input("Play again (a), reset this week (r) or back to menu (m): ").strip().lower()
            if command == "a":
                if controller.replay() is None:
                    self.output("No session available to replay.")
                    continue
                self.play()
                return
            if command == "r":
                if not self.confirm("Are you sure you want to reset progress for this week?"):
                    continue
                if controller.reset_session_progress() is None:
                    self.output("No session data available to reset.")
                else:
                    first = controller.session.words[0]
                    self.output(f"Progress for Level {first.level}, Week {first.week} has been reset.")
            elif command in ("m", "q", ""):
                return


def run_cli(app: PhonicsDrill, level: Optional[str] = None, week: Optional[str] = None,
            practice: bool = False, icon_dir: Optional[str] = None) -> None:
    """Start at the menu, or straight into a session when one is requested."""
    cli = DrillCli(app, icon_dir=icon_dir)
    if practice:
        app.controller.start_practice()
        cli.play()
    elif level is not None and week is not None:
        app.controller.start_weekly(level, week)
        cli.play()
    cli.run()
