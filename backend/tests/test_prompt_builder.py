"""
Unit tests for the render prompt builder.
"""
import pytest

from vatika.config import CAMERA_RULE_PROMPT, STYLE_PROMPT
from vatika.services.prompt_builder import build_iteration_prompt, build_scene_prompt


class TestScenePrompt:

    @pytest.mark.unit
    def test_balcony_prompt_structure(self, balcony_recommendation):
        prompt = build_scene_prompt(balcony_recommendation.items, "balcony")

        assert prompt.startswith(CAMERA_RULE_PROMPT)
        assert prompt.endswith(STYLE_PROMPT)
        assert "Image 1 is a photograph of a balcony or verandah" in prompt
        assert "railing hook planters are the highlight" in prompt

    @pytest.mark.unit
    def test_railing_hanger_line(self, balcony_recommendation):
        prompt = build_scene_prompt(balcony_recommendation.items, "balcony")
        assert (
            "- Image 2 (Balcony Hanger): Hook 3 of these along the entire balcony railing"
            in prompt
        )
        assert "colorful flowering petunias" in prompt

    @pytest.mark.unit
    def test_images_numbered_from_two(self, balcony_recommendation):
        prompt = build_scene_prompt(balcony_recommendation.items, "balcony")
        for offset, item in enumerate(balcony_recommendation.items):
            assert f"- Image {offset + 2} ({item.planter.name})" in prompt

    @pytest.mark.unit
    def test_quantity_wording(self, balcony_recommendation):
        prompt = build_scene_prompt(balcony_recommendation.items, "balcony")
        assert "(Tokyo Tall): Place 2 of these on the floor or a low stand" in prompt
        assert "(B2 Fabric Box): Place 1 on a shelf" in prompt

    @pytest.mark.unit
    def test_living_room_placements(self, living_room_recommendation):
        prompt = build_scene_prompt(living_room_recommendation.items, "living-room")
        assert "in a corner or beside the sofa as a statement piece" in prompt
        assert "beside a window, on a side table, or near a bookshelf" in prompt
        assert "railing" not in prompt.lower()
        # living rooms have no floor treatment section
        assert "turf" not in prompt
        assert "\n\n\n" not in prompt

    @pytest.mark.unit
    def test_terrace_scene(self):
        from vatika.services.recommender import recommend

        prompt = build_scene_prompt(recommend(50_000, "terrace").items, "terrace")
        assert "an open terrace, rooftop, or garden area" in prompt
        assert "hanging lanterns" in prompt


class TestIterationPrompt:

    @pytest.mark.unit
    def test_feedback_appended(self, balcony_recommendation):
        base = build_scene_prompt(balcony_recommendation.items, "balcony")
        prompt = build_iteration_prompt(
            balcony_recommendation.items, "  make the lights brighter \n", "balcony"
        )
        assert prompt == f"{base}\n\nAdditional changes: make the lights brighter"
