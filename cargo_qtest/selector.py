"""Interactive selection of the tests to run."""

import logging
from collections.abc import Sequence

from InquirerPy import inquirer
from InquirerPy.utils import get_style

from cargo_qtest.errors import SelectionAbortedError

logger = logging.getLogger(__name__)

PROMPT_MESSAGE = "Search and select set of tests you wish to execute:"
EMPTY_SELECTION_MESSAGE = "You must select at least one test."
INSTRUCTION = "↑↓: Navigate | Tab: Choose | →: Select All | ←: Undo All"
PAGE_SIZE = 20

KEYBINDINGS = {
    "toggle-all-true": [{"key": "right"}],
    "toggle-all-false": [{"key": "left"}],
}

PROMPT_STYLE = get_style(
    {
        "questionmark": "",
        "question": "bold",
        "pointer": "ansiyellow bold",
        "marker": "ansigreen bold",
        "fuzzy_prompt": "ansibrightmagenta",
        "fuzzy_match": "ansibrightgreen",
        "long_instruction": "ansiblue bold",
        "validator": "ansired",
    },
    style_override=False,
)


def validate_selection(chosen: Sequence[str]) -> bool:
    """Reject an empty selection."""
    return bool(chosen)


def hide_answer(_chosen: Sequence[str]) -> str:
    """Render nothing after the prompt closes; cargo prints what it runs."""
    return ""


def compute_excluded(options: Sequence[str], chosen: Sequence[str]) -> Sequence[str]:
    """Return the options that were not chosen, in listing order."""
    selected = set(chosen)
    return [option for option in options if option not in selected]


async def spawn_prompt_for_tests(options: Sequence[str]) -> Sequence[str]:
    """Prompt the user to pick tests and return the chosen names.

    Raises:
        SelectionAbortedError: If the user interrupts the prompt

    """
    prompt = inquirer.fuzzy(
        message=PROMPT_MESSAGE,
        choices=list(options),
        multiselect=True,
        validate=validate_selection,
        invalid_message=EMPTY_SELECTION_MESSAGE,
        transformer=hide_answer,
        keybindings=KEYBINDINGS,
        max_height=PAGE_SIZE,
        qmark="",
        amark="",
        pointer=">",
        marker="+",
        marker_pl="-",
        long_instruction=INSTRUCTION,
        style=PROMPT_STYLE,
    )

    try:
        chosen: Sequence[str] = await prompt.execute_async()
    except (KeyboardInterrupt, EOFError) as e:
        raise SelectionAbortedError("Test selection was cancelled") from e

    logger.debug("Selected %d of %d test(s)", len(chosen), len(options))
    return chosen
