from __future__ import annotations

import json
import unittest
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from montage_commands.commands import BREAK, EXTEND, EXTEND_TO, START
from montage_commands.errors import ConfigurationError, FormatError
from montage_commands.models import MutationEnvelope, UserInput
from montage_commands.request_builder import (
    build_envelope,
    build_request,
    duration_literal,
    next_occurrence,
)


class TestRequestBuilder(unittest.TestCase):
    def test_duration_literal_uses_minutes_designator(self) -> None:
        for minutes in (1, 5, 25, 90, 1440):
            self.assertEqual(duration_literal(str(minutes)), f"PT{minutes}M")

    def test_duration_literal_forwards_garbage_verbatim(self) -> None:
        self.assertEqual(duration_literal("ten"), "PTtenM")

    def test_start_envelope(self) -> None:
        envelope = build_envelope(START, UserInput(minutes="25", description="Write report"))

        self.assertEqual(
            envelope.variables,
            {"description": "Write report", "kind": "TASK", "duration": "PT25M"},
        )
        self.assertIn("start(description: $description, kind: $kind, duration: $duration)", envelope.query)
        self.assertIn("{ description duration projectedEndTime }", envelope.query)

    def test_break_envelope(self) -> None:
        envelope = build_envelope(BREAK, UserInput(minutes="5", description="Break"))

        self.assertEqual(envelope.variables["kind"], "BREAK")
        self.assertEqual(envelope.variables["duration"], "PT5M")
        self.assertIn("{ duration projectedEndTime }", envelope.query)

    def test_extend_envelope_has_duration_only(self) -> None:
        envelope = build_envelope(EXTEND, UserInput(minutes="10", description="ignored"))

        self.assertEqual(envelope.variables, {"duration": "PT10M"})
        self.assertIn("extendBy(duration: $duration)", envelope.query)

    def test_extend_to_targets_next_occurrence(self) -> None:
        now = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)

        later = build_envelope(EXTEND_TO, UserInput(target="11:30"), now=now)
        earlier = build_envelope(EXTEND_TO, UserInput(target="9:15"), now=now)

        self.assertEqual(later.variables, {"target": "2024-01-01T11:30:00+00:00"})
        self.assertEqual(earlier.variables, {"target": "2024-01-02T09:15:00+00:00"})

    def test_extend_to_next_day_uses_that_days_offset(self) -> None:
        try:
            zone = ZoneInfo("America/New_York")
        except ZoneInfoNotFoundError:
            self.skipTest("tz database unavailable")
        # Clocks move forward overnight, so tomorrow is UTC-4 while today is UTC-5.
        now = datetime(2024, 3, 9, 10, 0, tzinfo=zone)

        target = next_occurrence("9:00", now=now)

        self.assertEqual(target.isoformat(), "2024-03-10T09:00:00-04:00")
        self.assertEqual((target.hour, target.minute), (9, 0))

    def test_extend_to_rejects_unparseable_time(self) -> None:
        for text in ("", "noon", "25:00", "10:75"):
            with self.assertRaises(FormatError):
                next_occurrence(text)

    def test_build_request_posts_json(self) -> None:
        envelope = MutationEnvelope(query="mutation { x }", variables={"duration": "PT5M"})

        request = build_request("http://localhost:4774/graphql", envelope)

        self.assertEqual(request.method, "POST")
        self.assertEqual(str(request.url), "http://localhost:4774/graphql")
        self.assertEqual(request.headers["Content-Type"], "application/json")
        self.assertEqual(
            json.loads(request.content),
            {"query": "mutation { x }", "variables": {"duration": "PT5M"}},
        )

    def test_build_request_rejects_endpoint_without_host(self) -> None:
        envelope = MutationEnvelope(query="mutation { x }")
        for endpoint in ("/graphql", "not a url", "http://"):
            with self.assertRaises(ConfigurationError):
                build_request(endpoint, envelope)


if __name__ == "__main__":
    unittest.main()
