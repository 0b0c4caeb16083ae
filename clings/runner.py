"""Interactive watch and verify loops over the exercise tree."""

from __future__ import annotations

import shlex
import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from .exercises import (
    HINT_FILE,
    NOT_DONE_MARKER,
    PathLike,
    hint_file,
    is_complete,
    list_entries,
    problems_root,
    read_hint,
)

DEFAULT_COMPILER = "gcc"
HINT_REQUEST = "problem.hint"


class Runner:
    """Compiles exercises one after another and offers hints on failure."""

    def __init__(
        self,
        root: PathLike,
        compiler: str | Sequence[str] = DEFAULT_COMPILER,
        ask: Callable[[str], str] = input,
        out: Callable[[str], object] = print,
    ) -> None:
        self.root = Path(root)
        if isinstance(compiler, str):
            self.compiler = shlex.split(compiler)
        else:
            self.compiler = list(compiler)
        self.ask = ask
        self.out = out

    def _directories(self) -> list[Path]:
        return [entry for entry in list_entries(self.root) if entry.is_dir()]

    @staticmethod
    def _exercises(directory: Path) -> list[Path]:
        return [
            entry
            for entry in list_entries(directory)
            if entry.is_file() and entry.name != HINT_FILE
        ]

    def compile(self, path: PathLike) -> bool:
        """Run the compiler on one exercise and report whether it succeeded."""
        try:
            result = subprocess.run([*self.compiler, str(path)], check=False)
        except OSError as error:
            self.out(f"cannot run compiler: {error}")
            return False
        if result.returncode == 0:
            self.out("CONGRATULATIONS! problem compiled")
            return True
        self.out("solve error to compile")
        return False

    def offer_hint(self, directory: PathLike, index: int) -> str | None:
        """Ask whether a hint is wanted and show hint ``index`` of ``directory``."""
        answer = self.ask(f"for hint type <{HINT_REQUEST}> ").strip()
        if answer != HINT_REQUEST:
            self.out("Was that a typo? or you didn't want a hint?")
            return None
        try:
            hint = read_hint(hint_file(directory), index)
        except OSError as error:
            self.out(f"File Opening Error: {error}")
            return None
        if hint is None:
            self.out("No hint for the problem")
            return None
        self.out(f"Hint: {hint}")
        return hint

    def _work_on(self, directory: Path, index: int, exercise: Path) -> None:
        while True:
            if not self.compile(exercise):
                self.offer_hint(directory, index)
                continue
            if is_complete(exercise):
                return
            self.ask(f"Remove {NOT_DONE_MARKER} comment to continue compilation ")

    def watch(self) -> None:
        """Walk every exercise in order until each compiles and is marked done."""
        for directory in self._directories():
            for index, exercise in enumerate(self._exercises(directory)):
                self._work_on(directory, index, exercise)

    def verify(self) -> dict[Path, bool]:
        """Compile every exercise once and return the outcome for each."""
        return {
            exercise: self.compile(exercise)
            for directory in self._directories()
            for exercise in self._exercises(directory)
        }


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: ``watch`` or ``verify`` the exercises below the current directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Enter a valid argument verify/watch")
        return 1
    command = args[0]
    if command not in ("watch", "verify"):
        print("Command not found")
        return 1
    runner = Runner(problems_root(Path.cwd()))
    try:
        if command == "watch":
            runner.watch()
            return 0
        return 0 if all(runner.verify().values()) else 1
    except OSError as error:
        print(f"Unable to open: {error}")
        return 1
    except (EOFError, KeyboardInterrupt):
        return 1


if __name__ == "__main__":
    sys.exit(main())