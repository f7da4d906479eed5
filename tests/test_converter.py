"""Inbound filtering and config rewrite tests."""

from __future__ import annotations

import json
import unittest

from tests.helpers import TempCwdTestCase

from surgebox.converter import filter_mixed_inbounds, save_config
from surgebox.errors import FileWriteError, MalformedInbound, MalformedSubscription, MissingInbounds
from surgebox.models import ControllerInfo

MIXED = {"type": "mixed", "tag": "mixed-in", "listen": "127.0.0.1", "listen_port": 7890, "sniff": True}
TUN = {"type": "tun", "tag": "tun-in", "inet4_address": "172.19.0.1/30", "auto_route": True}


def _document(inbounds):
    return {
        "log": {"level": "warn", "timestamp": True},
        "dns": {"servers": [{"tag": "google", "address": "tls://8.8.8.8"}]},
        "inbounds": inbounds,
        "outbounds": [{"type": "direct", "tag": "direct"}],
        "route": {"final": "direct"},
    }


class SaveConfigTests(TempCwdTestCase):
    def _written(self):
        return json.loads((self.tmp / "config.json").read_text(encoding="utf-8"))

    def test_keeps_single_mixed_inbound(self) -> None:
        controller = save_config(_document([TUN, MIXED]))
        self.assertEqual(controller, ControllerInfo(address="127.0.0.1", port="7890"))
        written = self._written()
        self.assertEqual(written["inbounds"], [MIXED])

    def test_preserves_other_top_level_keys(self) -> None:
        doc = _document([MIXED, TUN])
        save_config(doc)
        written = self._written()
        for key in ("log", "dns", "outbounds", "route"):
            self.assertEqual(written[key], doc[key])
        self.assertEqual(list(written), list(doc))

    def test_no_mixed_inbound_gives_empty_controller(self) -> None:
        controller = save_config(_document([TUN]))
        self.assertEqual(controller, ControllerInfo())
        self.assertTrue(controller.is_empty())
        self.assertEqual(self._written()["inbounds"], [])

    def test_overwrites_existing_file(self) -> None:
        (self.tmp / "config.json").write_text("stale content that is much longer than needed" * 50, encoding="utf-8")
        save_config(_document([MIXED]))
        self.assertEqual(self._written()["inbounds"], [MIXED])

    def test_output_is_pretty_printed(self) -> None:
        save_config(_document([MIXED]))
        text = (self.tmp / "config.json").read_text(encoding="utf-8")
        self.assertIn('\n  "inbounds": [', text)

    def test_missing_inbounds(self) -> None:
        doc = _document([])
        del doc["inbounds"]
        with self.assertRaises(MissingInbounds):
            save_config(doc)
        self.assertFalse((self.tmp / "config.json").exists())

    def test_inbounds_not_an_array(self) -> None:
        with self.assertRaises(MalformedSubscription):
            save_config(_document({"type": "mixed"}))

    def test_unwritable_path(self) -> None:
        with self.assertRaises(FileWriteError):
            save_config(_document([MIXED]), str(self.tmp / "missing-dir" / "config.json"))


class FilterMixedInboundsTests(unittest.TestCase):
    def test_last_mixed_wins_but_all_are_kept(self) -> None:
        second = {"type": "mixed", "listen": "0.0.0.0", "listen_port": 2080}
        kept, controller = filter_mixed_inbounds([MIXED, TUN, second])
        self.assertEqual(kept, [MIXED, second])
        self.assertEqual(controller, ControllerInfo(address="0.0.0.0", port="2080"))

    def test_type_match_is_case_sensitive(self) -> None:
        kept, controller = filter_mixed_inbounds([dict(MIXED, type="Mixed")])
        self.assertEqual(kept, [])
        self.assertTrue(controller.is_empty())

    def test_string_port_is_used_as_is(self) -> None:
        _, controller = filter_mixed_inbounds([dict(MIXED, listen_port="7890")])
        self.assertEqual(controller.port, "7890")

    def test_whole_float_port_is_normalized(self) -> None:
        _, controller = filter_mixed_inbounds([dict(MIXED, listen_port=7890.0)])
        self.assertEqual(controller.port, "7890")

    def test_entry_without_type_is_skipped(self) -> None:
        kept, _ = filter_mixed_inbounds([{"tag": "anonymous"}, MIXED])
        self.assertEqual(kept, [MIXED])

    def test_malformed_entries(self) -> None:
        cases = [
            ["not-an-object"],
            [{"type": 1}],
            [{"type": "mixed", "listen_port": 7890}],
            [{"type": "mixed", "listen": "127.0.0.1"}],
            [{"type": "mixed", "listen": "127.0.0.1", "listen_port": True}],
            [{"type": "mixed", "listen": "127.0.0.1", "listen_port": [7890]}],
            [{"type": "mixed", "listen": "127.0.0.1", "listen_port": 7890.5}],
        ]
        for inbounds in cases:
            with self.subTest(inbounds=inbounds):
                with self.assertRaises(MalformedInbound) as ctx:
                    filter_mixed_inbounds([TUN] + inbounds)
                self.assertEqual(ctx.exception.index, 1)


if __name__ == "__main__":
    unittest.main()
