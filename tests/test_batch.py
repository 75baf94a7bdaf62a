from unittest.mock import MagicMock

import pytest

from post_prompts.models.templates import TEMPLATES
from post_prompts.services import BatchRunner, PromptComposer, ValidationError


def test_run_returns_quantity_results_in_order():
    results = BatchRunner().run("We are hiring a telecaller", 5)

    assert len(results) == 5
    assert [r.template for r in results] == [TEMPLATES[i % len(TEMPLATES)] for i in range(5)]
    assert [r.id for r in results] == [f"prompt-1-{i}" for i in range(5)]


def test_max_quantity():
    results = BatchRunner().run("Some stats", 10)
    assert [r.template for r in results] == TEMPLATES


def test_batch_numbers_increase():
    runner = BatchRunner()
    first = runner.run("hello world", 2)
    second = runner.run("hello world", 2)

    assert [r.id for r in first] == ["prompt-1-0", "prompt-1-1"]
    assert [r.id for r in second] == ["prompt-2-0", "prompt-2-1"]
    assert [r.final_copy for r in first] == [r.final_copy for r in second]


@pytest.mark.parametrize("content", ["", "   ", "\n\t "])
def test_blank_content_never_reaches_composer(content):
    composer = MagicMock(spec=PromptComposer)
    runner = BatchRunner(composer)

    with pytest.raises(ValidationError, match="post description"):
        runner.run(content, 3)
    composer.compose.assert_not_called()


@pytest.mark.parametrize("quantity", [0, -1, 11])
def test_quantity_out_of_range(quantity):
    composer = MagicMock(spec=PromptComposer)

    with pytest.raises(ValidationError, match="between 1 and 10"):
        BatchRunner(composer).run("hello", quantity)
    composer.compose.assert_not_called()


def test_runner_calls_composer_per_index():
    composer = MagicMock(spec=PromptComposer)
    BatchRunner(composer).run("hello", 3)

    assert [c.args for c in composer.compose.call_args_list] == [
        ("hello", 0), ("hello", 1), ("hello", 2),
    ]
    assert all(c.kwargs == {"batch": 1} for c in composer.compose.call_args_list)


def test_validate_runs_without_composing():
    composer = MagicMock(spec=PromptComposer)
    runner = BatchRunner(composer)

    runner.validate("hello", 3)
    with pytest.raises(ValidationError, match="post description"):
        runner.validate("   ", 3)
    composer.compose.assert_not_called()


def test_quantity_message_is_self_contained():
    with pytest.raises(ValidationError) as exc_info:
        BatchRunner.validate("hello", 11)
    assert str(exc_info.value) == "Quantity must be between 1 and 10, got 11"
