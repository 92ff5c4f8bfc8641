"""Tests for listicle prompt construction."""

from services.prompt_builder import DATA_PLACEHOLDER, PromptPair, build_prompts


class TestSystemPrompt:
    def test_lists_all_five_fields(self):
        prompts = build_prompts("Best index funds", "beginner")
        for field in ("title", "introduction", "tableOfContents", "mainContent", "conclusion"):
            assert field in prompts.system

    def test_word_count_targets(self):
        prompts = build_prompts("Best index funds", "beginner")
        assert "Introduction: exactly 100 words" in prompts.system
        assert "Conclusion: exactly 50 words" in prompts.system

    def test_tone_follows_audience(self):
        prompts = build_prompts("Best index funds", "advanced")
        assert "accessible for advanced level readers" in prompts.system

    def test_system_prompt_independent_of_flag(self):
        evergreen = build_prompts("Best index funds", "beginner", data_driven=False)
        data_driven = build_prompts("Best index funds", "beginner", data_driven=True)
        assert evergreen.system == data_driven.system


class TestUserPrompt:
    def test_data_driven_asks_for_placeholder(self):
        prompts = build_prompts("Top dividend stocks this quarter", "intermediate", data_driven=True)
        assert DATA_PLACEHOLDER in prompts.user
        assert "requires current market data" in prompts.user
        assert "evergreen" not in prompts.user

    def test_evergreen_has_no_placeholder(self):
        prompts = build_prompts("How to budget", "beginner", data_driven=False)
        assert DATA_PLACEHOLDER not in prompts.user
        assert "placeholder" not in prompts.user
        assert "This is evergreen content." in prompts.user
        assert prompts.user.startswith('Create a complete listicle for: "How to budget"')

    def test_context_line_included(self):
        prompts = build_prompts("How to budget", "beginner", context="UK readers")
        assert "Additional context: UK readers" in prompts.user

    def test_missing_context_leaves_no_artifact(self):
        for context in (None, "", "   "):
            prompts = build_prompts("How to budget", "beginner", context=context)
            assert "Additional context" not in prompts.user
            assert "None" not in prompts.user

    def test_audience_line(self):
        prompts = build_prompts("How to budget", "retirees")
        assert "Target audience: retirees" in prompts.user


def test_build_is_pure():
    first = build_prompts("Credit score myths", "beginner", "US only", True)
    second = build_prompts("Credit score myths", "beginner", "US only", True)
    assert first == second
    assert isinstance(first, PromptPair)


def test_braces_in_inputs_are_kept_verbatim():
    prompts = build_prompts("Saving {fast}", "{audience}", context="{placeholder}")
    assert '"Saving {fast}"' in prompts.user
    assert "Additional context: {placeholder}" in prompts.user
