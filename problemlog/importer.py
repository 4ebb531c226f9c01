# =========================
# importer.py
# LeetCode から問題を取り込む
# =========================

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

import requests

from .errors import InvalidURL, ProblemNotFound, UpstreamUnavailable, ValidationError
from .normalizer import html_to_text

logger = logging.getLogger(__name__)

DEFAULT_GRAPHQL_URL = "https://leetcode.com/graphql"

SLUG_PATTERN = re.compile(r"leetcode\.com/problems/([\w-]+)")

# この見出し以降は取り込まない
STOP_PREFIXES = ("constraints", "**constraints", "**follow-up")

QUESTION_QUERY = """
query questionData($titleSlug: String!) {
  question(titleSlug: $titleSlug) {
    title
    content
    difficulty
    topicTags {
      name
    }
  }
}
"""

HEADERS = {
    "Content-Type": "application/json",
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
}


@dataclass
class ImportedProblem:
    title: str
    content: str
    difficulty: str | None
    tags: list[str] = field(default_factory=list)

    def to_dict(self):
        return {
            "title": self.title,
            "content": self.content,
            "difficulty": self.difficulty,
            "tags": list(self.tags),
        }


def extract_slug(url: str) -> str:
    if not url or not isinstance(url, str):
        raise ValidationError("URL is required")
    match = SLUG_PATTERN.search(url)
    if not match:
        raise InvalidURL(
            "Invalid LeetCode problem URL. Please use format: "
            "https://leetcode.com/problems/problem-name/"
        )
    return match.group(1)


def trim_at_constraints(text: str) -> str:
    kept = []
    for line in text.split("\n"):
        lowered = line.strip().lower()
        if lowered.startswith(STOP_PREFIXES):
            break
        kept.append(line)
    return "\n".join(kept).strip()


class ProblemImporter:
    """URL 1 件につき GraphQL を 1 回だけ呼ぶ（状態は持たない）"""

    def __init__(
        self,
        graphql_url: str = DEFAULT_GRAPHQL_URL,
        timeout: tuple[float, float] = (5.0, 15.0),
        session: requests.Session | None = None,
    ):
        self.graphql_url = graphql_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config) -> "ProblemImporter":
        return cls(
            graphql_url=config["LEETCODE_GRAPHQL_URL"],
            timeout=(config["IMPORT_CONNECT_TIMEOUT"], config["IMPORT_READ_TIMEOUT"]),
        )

    def fetch_question(self, slug: str) -> dict:
        payload = {
            "operationName": "questionData",
            "variables": {"titleSlug": slug},
            "query": QUESTION_QUERY,
        }
        logger.info("Fetching LeetCode problem %s", slug)
        try:
            resp = self.session.post(
                self.graphql_url, json=payload, headers=HEADERS, timeout=self.timeout
            )
            resp.raise_for_status()
            body = resp.json()
        except requests.RequestException as exc:
            logger.warning("LeetCode request failed for %s: %s", slug, exc)
            raise UpstreamUnavailable("Failed to fetch problem from LeetCode") from exc
        except ValueError as exc:
            logger.warning("LeetCode returned invalid JSON for %s: %s", slug, exc)
            raise UpstreamUnavailable("Failed to fetch problem from LeetCode") from exc

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(body, dict) or (data is not None and not isinstance(data, dict)):
            logger.warning("LeetCode returned an unexpected body for %s", slug)
            raise UpstreamUnavailable("Failed to fetch problem from LeetCode")
        question = (data or {}).get("question")
        if question and not isinstance(question, dict):
            logger.warning("LeetCode returned an unexpected question for %s", slug)
            raise UpstreamUnavailable("Failed to fetch problem from LeetCode")
        if not question:
            logger.info("LeetCode problem not found: %s", slug)
            raise ProblemNotFound("Problem not found. Please check the URL and try again.")
        return question

    def import_problem(self, url: str) -> ImportedProblem:
        slug = extract_slug(url)
        question = self.fetch_question(slug)

        html = question.get("content") or ""
        topic_tags = question.get("topicTags") or []
        if not isinstance(html, str) or not isinstance(topic_tags, list) \
                or not all(isinstance(tag, dict) for tag in topic_tags):
            logger.warning("LeetCode returned malformed fields for %s", slug)
            raise UpstreamUnavailable("Failed to fetch problem from LeetCode")

        content = trim_at_constraints(html_to_text(html))
        tags = [tag["name"] for tag in topic_tags if tag.get("name")]

        logger.info("Imported LeetCode problem %s", slug)
        return ImportedProblem(
            title=question.get("title") or "",
            content=content,
            difficulty=question.get("difficulty"),
            tags=tags,
        )
