#!/usr/bin/env python3
"""
Unit tests for the career agent client.

Tests verify:
- Replies are decoded into typed models and scores are clamped
- Every provider or decoding failure surfaces as AgentError
- Refinement never mutates the tips it was given
- Chat history is sent with OpenAI-style roles
"""

import unittest

from core.agent import CareerAgent
from core.exceptions import AgentError
from core.llm.schema_models import JOB_ANALYSIS_SCHEMA, JOB_DISCOVERY_SCHEMA, RESUME_REFINEMENT_SCHEMA
from core.llm.system_prompts import CHAT_FALLBACK_REPLY
from core.models import ChatMessage, ChatRole, JobAnalysis, UserProfile
from tests.mocks.agent_mocks import MockLLMProvider, analysis_payload, make_analysis, make_job


def _profile() -> UserProfile:
    profile = UserProfile(title="Backend Engineer")
    profile.add_skill("Python")
    profile.add_skill("Go")
    return profile


def _discovered(job_id: str, score: float) -> dict:
    return {
        "id": job_id,
        "title": "Backend Engineer",
        "company": f"Company {job_id}",
        "location": "Remote",
        "snippet": "Build APIs",
        "url": f"https://jobs.example.com/{job_id}",
        "match_score": score,
    }


class TestDiscoverJobs(unittest.IsolatedAsyncioTestCase):

    async def test_returns_jobs_in_service_order(self):
        provider = MockLLMProvider(structured=[{"jobs": [_discovered("1", 90), _discovered("2", 40)]}])
        agent = CareerAgent(provider)

        result = await agent.discover_jobs(_profile(), "Remote")

        self.assertEqual([job.id for job in result.jobs], ["1", "2"])
        self.assertEqual(result.jobs[0].match_score, 90)
        self.assertIsNone(result.jobs[0].tracking_status)
        self.assertEqual(result.sources, [])

    async def test_prompt_carries_title_skills_location_and_count(self):
        provider = MockLLMProvider(structured=[{"jobs": []}])
        agent = CareerAgent(provider, discovery_count=7)

        await agent.discover_jobs(_profile(), "Berlin")

        call = provider.structured_calls[0]
        self.assertIs(call["schema_spec"], JOB_DISCOVERY_SCHEMA)
        self.assertIn("7 recent job openings", call["user_message"])
        self.assertIn("Backend Engineer", call["user_message"])
        self.assertIn("Python, Go", call["user_message"])
        self.assertIn("Berlin", call["user_message"])

    async def test_out_of_range_scores_are_clamped(self):
        provider = MockLLMProvider(structured=[{"jobs": [_discovered("1", 140), _discovered("2", -5)]}])
        result = await CareerAgent(provider).discover_jobs(_profile())

        self.assertEqual([job.match_score for job in result.jobs], [100, 0])

    async def test_non_finite_score_raises_agent_error(self):
        provider = MockLLMProvider(structured=[{"jobs": [_discovered("1", float("nan"))]}])
        with self.assertRaises(AgentError):
            await CareerAgent(provider).discover_jobs(_profile())

    async def test_malformed_reply_raises_agent_error(self):
        provider = MockLLMProvider(structured=[{"jobs": [{"id": "1"}]}])
        with self.assertRaises(AgentError):
            await CareerAgent(provider).discover_jobs(_profile())

    async def test_provider_failure_raises_agent_error_with_cause(self):
        boom = ConnectionError("unreachable")
        provider = MockLLMProvider(structured=[boom])
        with self.assertRaises(AgentError) as ctx:
            await CareerAgent(provider).discover_jobs(_profile())
        self.assertIs(ctx.exception.__cause__, boom)


class TestAnalyzeJob(unittest.IsolatedAsyncioTestCase):

    async def test_returns_typed_analysis(self):
        provider = MockLLMProvider(structured=[analysis_payload(match_score=72)])
        analysis = await CareerAgent(provider).analyze_job(_profile(), make_job())

        self.assertIsInstance(analysis, JobAnalysis)
        self.assertEqual(analysis.match_score, 72)
        self.assertEqual(analysis.market_research.stability_rating, "High")
        self.assertIs(provider.structured_calls[0]["schema_spec"], JOB_ANALYSIS_SCHEMA)

    async def test_prompt_carries_profile_and_job(self):
        provider = MockLLMProvider(structured=[analysis_payload()])
        await CareerAgent(provider).analyze_job(_profile(), make_job(company="Globex", location="Lisbon"))

        message = provider.structured_calls[0]["user_message"]
        self.assertIn('"title":"Backend Engineer"', message)
        self.assertIn('company "Globex"', message)
        self.assertIn('in "Lisbon"', message)

    async def test_score_is_clamped(self):
        provider = MockLLMProvider(structured=[analysis_payload(match_score=250)])
        analysis = await CareerAgent(provider).analyze_job(_profile(), make_job())
        self.assertEqual(analysis.match_score, 100)

    async def test_non_finite_score_raises_agent_error(self):
        for score in (float("nan"), float("inf")):
            provider = MockLLMProvider(structured=[analysis_payload(match_score=score)])
            with self.assertRaises(AgentError):
                await CareerAgent(provider).analyze_job(_profile(), make_job())

    async def test_missing_section_raises_agent_error(self):
        payload = analysis_payload()
        del payload["market_research"]
        provider = MockLLMProvider(structured=[payload])
        with self.assertRaises(AgentError):
            await CareerAgent(provider).analyze_job(_profile(), make_job())

    async def test_invalid_stability_rating_raises_agent_error(self):
        payload = analysis_payload()
        payload["market_research"]["stability_rating"] = "Excellent"
        provider = MockLLMProvider(structured=[payload])
        with self.assertRaises(AgentError):
            await CareerAgent(provider).analyze_job(_profile(), make_job())


class TestRefineResume(unittest.IsolatedAsyncioTestCase):

    async def test_returns_new_list_and_leaves_input_untouched(self):
        provider = MockLLMProvider(structured=[{"refined_tips": ["c"]}])
        original = ["a", "b"]

        refined = await CareerAgent(provider).refine_resume(original, make_job(), "Make it concise")

        self.assertEqual(refined, ["c"])
        self.assertEqual(original, ["a", "b"])
        call = provider.structured_calls[0]
        self.assertIs(call["schema_spec"], RESUME_REFINEMENT_SCHEMA)
        self.assertIn('["a", "b"]', call["user_message"])
        self.assertIn("Make it concise", call["user_message"])

    async def test_failure_raises_agent_error(self):
        provider = MockLLMProvider(structured=[{"tips": ["c"]}])
        with self.assertRaises(AgentError):
            await CareerAgent(provider).refine_resume(["a"], make_job(), "shorter")


class TestSendMessage(unittest.IsolatedAsyncioTestCase):

    async def test_history_roles_and_new_message_are_sent(self):
        provider = MockLLMProvider(replies=["Ask about on-call."])
        history = [
            ChatMessage(role=ChatRole.USER, text="What should I ask?"),
            ChatMessage(role=ChatRole.MODEL, text="Ask about the team."),
        ]

        reply = await CareerAgent(provider).send_message(history, "Anything else?", make_job(), make_analysis())

        self.assertEqual(reply, "Ask about on-call.")
        call = provider.reply_calls[0]
        self.assertEqual(call["messages"], [
            {"role": "user", "content": "What should I ask?"},
            {"role": "assistant", "content": "Ask about the team."},
            {"role": "user", "content": "Anything else?"},
        ])
        self.assertIn("TechCorp", call["system_prompt"])
        self.assertIn("decision_summary", call["system_prompt"])

    async def test_empty_reply_uses_fallback(self):
        provider = MockLLMProvider(replies=[""])
        reply = await CareerAgent(provider).send_message([], "hi", make_job(), make_analysis())
        self.assertEqual(reply, CHAT_FALLBACK_REPLY)

    async def test_failure_raises_agent_error(self):
        provider = MockLLMProvider(replies=[TimeoutError("slow")])
        with self.assertRaises(AgentError):
            await CareerAgent(provider).send_message([], "hi", make_job(), make_analysis())


if __name__ == '__main__':
    unittest.main()
