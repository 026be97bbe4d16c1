import json
import unittest

from basket.domain.SharePayload import ShareItem, SharePayload
from basket.logic.share.codec import decode_share_payload, encode_share, encode_share_payload
from basket.logic.share.compression import BinaryCompressor, CompressionCapability
from basket.logic.share.detector import (
    CompactArray, Compressed, FullObject, Unrecognized, classify_transport,
)

SAMPLE = {
    "version": 1,
    "listName": "Weekly basket",
    "items": [
        {
            "name": "Milk",
            "quantity": 2,
            "unit": "l",
            "category": "Dairy",
            "comment": "",
            "scope": "Breakfast",
            "purchased": False,
        }
    ],
}

WITH_DEFLATE = BinaryCompressor(CompressionCapability(available=True))
WITHOUT_DEFLATE = BinaryCompressor(CompressionCapability(available=False))


def sample_payload():
    return SharePayload.from_dict(SAMPLE)


class TestClassify(unittest.TestCase):

    def test_prefix_wins(self):
        self.assertEqual(classify_transport("B1:abc"), Compressed("abc"))

    def test_array(self):
        self.assertIsInstance(classify_transport('[1,"x",[""],[]]'), CompactArray)

    def test_object(self):
        self.assertIsInstance(classify_transport(json.dumps(SAMPLE)), FullObject)

    def test_scalars_are_full_objects(self):
        # shape check happens in validation, not classification
        self.assertIsInstance(classify_transport("null"), FullObject)
        self.assertIsInstance(classify_transport('"text"'), FullObject)

    def test_garbage(self):
        self.assertIsInstance(classify_transport("not json at all"), Unrecognized)
        self.assertIsInstance(classify_transport("NaN"), Unrecognized)


class TestEncodeDecode(unittest.TestCase):

    def test_scenario_weekly_basket(self):
        for compressor in (WITH_DEFLATE, WITHOUT_DEFLATE):
            decoded = decode_share_payload(encode_share_payload(sample_payload(), compressor), WITH_DEFLATE)
            self.assertIsNotNone(decoded)
            self.assertEqual(decoded.list_name, "Weekly basket")
            self.assertEqual(len(decoded.items), 1)
            self.assertEqual(decoded.items[0].name, "Milk")

    def test_compressed_form(self):
        encoded = encode_share(sample_payload(), WITH_DEFLATE)
        self.assertTrue(encoded.compressed)
        self.assertTrue(encoded.transport.startswith("B1:"))
        self.assertNotIn("=", encoded.transport)

    def test_uncompressed_form_is_compact_json(self):
        encoded = encode_share(sample_payload(), WITHOUT_DEFLATE)
        self.assertFalse(encoded.compressed)
        self.assertEqual(
            json.loads(encoded.transport),
            [1, "Weekly basket", ["", "Milk", "l", "Dairy", "Breakfast"], [[1, 2, 2, 3, 0, 4, 0]]],
        )

    def test_round_trip_keeps_every_field(self):
        payload = SharePayload("Party 🎉", [
            ShareItem("Chips", 3, "pack", "Pantry", "salted", "Evening", False),
            ShareItem("Juice", 0.5, "l", "Drinks", "", "", True),
            ShareItem("Chips", 1, "pack", "Pantry", "paprika", "Evening", False),
        ])
        for compressor in (WITH_DEFLATE, WITHOUT_DEFLATE):
            self.assertEqual(decode_share_payload(encode_share_payload(payload, compressor), WITH_DEFLATE), payload)

    def test_large_list(self):
        payload = SharePayload("Big", [
            ShareItem(f"Product {i}", i, "pcs", f"Aisle {i % 7}", "", "", i % 2 == 0) for i in range(2000)
        ])
        decoded = decode_share_payload(encode_share_payload(payload, WITH_DEFLATE), WITH_DEFLATE)
        self.assertEqual(decoded, payload)


class TestFormatDiscrimination(unittest.TestCase):

    def test_hand_built_array_and_object_agree(self):
        array_form = json.dumps([1, "Weekly basket", ["", "Milk", "l", "Dairy", "Breakfast"], [[1, 2, 2, 3, 0, 4, 0]]])
        from_array = decode_share_payload(array_form, WITHOUT_DEFLATE)
        from_object = decode_share_payload(json.dumps(SAMPLE), WITHOUT_DEFLATE)
        self.assertIsNotNone(from_array)
        self.assertIsNotNone(from_object)
        self.assertEqual(from_array, from_object)

    def test_array_accepted_when_compression_available(self):
        encoded = encode_share_payload(sample_payload(), WITHOUT_DEFLATE)
        self.assertEqual(decode_share_payload(encoded, WITH_DEFLATE), sample_payload())

    def test_full_object_ignores_unknown_keys(self):
        data = json.loads(json.dumps(SAMPLE))
        data["sharedBy"] = "someone"
        data["items"][0]["note"] = "x"
        self.assertIsNotNone(decode_share_payload(json.dumps(data), WITH_DEFLATE))

    def test_full_object_keeps_empty_fields(self):
        data = json.loads(json.dumps(SAMPLE))
        data["items"][0]["name"] = ""
        decoded = decode_share_payload(json.dumps(data), WITH_DEFLATE)
        self.assertEqual(decoded.items[0].name, "")


class TestInvalidInput(unittest.TestCase):

    def assertInvalid(self, raw, compressor=WITH_DEFLATE):
        self.assertIsNone(decode_share_payload(raw, compressor), raw)

    def test_version_gate(self):
        self.assertInvalid('{"version":2}')
        self.assertInvalid('{"version":2,"listName":"x","items":[]}')
        self.assertInvalid('{"version":true,"listName":"x","items":[]}')
        self.assertInvalid('[2,"x",[""],[]]')

    def test_non_json(self):
        for raw in ("", "hello", "{", "[1,", "NaN", "{'version': 1}"):
            self.assertInvalid(raw)

    def test_full_object_type_mismatches(self):
        mutations = [
            ("listName", 5),
            ("items", {}),
        ]
        for key, value in mutations:
            data = json.loads(json.dumps(SAMPLE))
            data[key] = value
            self.assertInvalid(json.dumps(data))
        item_mutations = [
            ("name", None),
            ("quantity", "2"),
            ("quantity", True),
            ("unit", 1),
            ("category", []),
            ("comment", None),
            ("scope", 0),
            ("purchased", 1),
        ]
        for key, value in item_mutations:
            data = json.loads(json.dumps(SAMPLE))
            data["items"][0][key] = value
            self.assertInvalid(json.dumps(data))

    def test_full_object_list_name_only_by_wire_key(self):
        self.assertInvalid('{"version":1,"list_name":"x","items":[]}')
        self.assertIsNotNone(decode_share_payload('{"version":1,"listName":"x","items":[]}', WITH_DEFLATE))

    def test_full_object_missing_item_field(self):
        data = json.loads(json.dumps(SAMPLE))
        del data["items"][0]["scope"]
        self.assertInvalid(json.dumps(data))

    def test_non_object_items(self):
        self.assertInvalid('{"version":1,"listName":"x","items":[null]}')
        self.assertInvalid("null")
        self.assertInvalid("42")

    def test_nan_quantity(self):
        self.assertInvalid('[1,"x",[""],[[0,NaN,0,0,0,0,0]]]')
        self.assertInvalid('{"version":1,"listName":"x","items":[{"name":"a","quantity":Infinity,'
                           '"unit":"","category":"","comment":"","scope":"","purchased":false}]}')

    def test_malformed_base64(self):
        self.assertInvalid("B1:not base64!")
        self.assertInvalid("B1:abcde")

    def test_truncated_base64(self):
        encoded = encode_share_payload(sample_payload(), WITH_DEFLATE)
        for cut in (4, len(encoded) // 2, len(encoded) - 3):
            self.assertInvalid(encoded[:cut])

    def test_valid_base64_but_not_deflate(self):
        self.assertInvalid("B1:" + "_" * 16)

    def test_compressed_payload_without_decompressor(self):
        encoded = encode_share_payload(sample_payload(), WITH_DEFLATE)
        self.assertInvalid(encoded, WITHOUT_DEFLATE)

    def test_compressed_payload_that_is_not_compact(self):
        from basket.logic.share.base64url import to_base64url
        body = WITH_DEFLATE.compress(json.dumps(SAMPLE).encode("utf-8")).data
        self.assertInvalid("B1:" + to_base64url(body))

    def test_deeply_nested_input(self):
        self.assertInvalid("[" * 100000 + "]" * 100000)

    def test_non_text_input(self):
        self.assertInvalid(None)
        self.assertInvalid(b"[1]")

    def test_compressed_payload_inflating_past_limit(self):
        from basket.logic.share.base64url import to_base64url
        small = BinaryCompressor(CompressionCapability(available=True, max_output=64))
        body = small.compress(b'[1,"' + b"x" * 1000 + b'",[""],[]]').data
        self.assertInvalid("B1:" + to_base64url(body), small)
        self.assertIsNotNone(decode_share_payload("B1:" + to_base64url(body), WITH_DEFLATE))


class TestLoneSurrogates(unittest.TestCase):

    def test_compact_text_becomes_well_formed(self):
        decoded = decode_share_payload('[1,"\\ud800",["","Tea\\udc00"],[[1,1,0,0,0,0,0]]]', WITH_DEFLATE)
        self.assertEqual(decoded.list_name, "\ufffd")
        self.assertEqual(decoded.items[0].name, "Tea\ufffd")

    def test_full_object_text_becomes_well_formed(self):
        raw = json.dumps(SAMPLE).replace("Weekly basket", "Weekly \\udbff").replace("Milk", "Milk\\ud83d")
        decoded = decode_share_payload(raw, WITH_DEFLATE)
        self.assertEqual(decoded.list_name, "Weekly \ufffd")
        self.assertEqual(decoded.items[0].name, "Milk\ufffd")

    def test_decoded_payload_can_be_shared_again(self):
        decoded = decode_share_payload('[1,"\\udfff",["","\\ud800x"],[[1,1,0,0,0,0,0]]]', WITH_DEFLATE)
        for compressor in (WITH_DEFLATE, WITHOUT_DEFLATE):
            transport = encode_share_payload(decoded, compressor)
            self.assertEqual(decode_share_payload(transport, compressor), decoded)

    def test_escaped_surrogate_pair_is_kept(self):
        decoded = decode_share_payload('[1,"\\ud83d\\uded2",[""],[]]', WITH_DEFLATE)
        self.assertEqual(decoded.list_name, "\U0001f6d2")
