"""
Integration tests for script safety of SafeJSON output.

Each payload is a classic way of breaking out of a <script> block or an HTML
attribute. Output of every constructor is checked for the sequences that
would let the payload escape, and for preserving the payload as data.
"""

import json
import unittest

from safejson import EncoderSettings, SafeJSONConfig, json_escaped, json_from_value, json_string
from safejson.core.interchange import is_interchange_valid


PAYLOADS = [
    "</script><script>alert(1)</script>",
    "</SCRIPT>",
    "<!--<script>",
    "-->",
    "<![CDATA[ ]]>",
    "<img src=x onerror=alert(1)>",
    "' onmouseover='alert(1)",
    '" onmouseover="alert(1)',
    "&lt;script&gt;",
    "line\u2028separator\u2029paragraph",
    "javascript:alert(1)",
]

FORBIDDEN = ["</", "<!--", "-->", "<", ">", "&", "\u2028", "\u2029"]


class TestScriptSafety(unittest.TestCase):
    """Test that untrusted data cannot break out of its context."""

    def assert_script_safe(self, text):
        for sequence in FORBIDDEN:
            self.assertNotIn(sequence, text)

    def test_parsed_strings(self):
        """Test payloads inside parsed JSON strings."""
        for payload in PAYLOADS:
            with self.subTest(payload=payload):
                document = json.dumps({"comment": payload, "tags": [payload]})
                result = json_from_value(document)

                self.assert_script_safe(str(result))
                self.assertEqual(
                    json.loads(str(result)), {"comment": payload, "tags": [payload]}
                )

    def test_parsed_keys(self):
        """Test payloads used as object keys."""
        for payload in PAYLOADS:
            with self.subTest(payload=payload):
                result = json_from_value(json.dumps({payload: 1}))

                self.assert_script_safe(str(result))
                self.assertEqual(json.loads(str(result)), {payload: 1})

    def test_escaped_text(self):
        """Test payloads passed through string escaping."""
        for payload in PAYLOADS:
            with self.subTest(payload=payload):
                escaped = str(json_escaped(payload))
                quoted = str(json_string(payload))

                self.assert_script_safe(escaped)
                self.assertNotIn("'", escaped)
                self.assertNotIn('"', escaped)
                self.assertEqual(json.loads(quoted), payload)

    def test_pre_escaped_input_stays_escaped(self):
        """Test that \\u escapes in the input are not decoded into raw markup."""
        result = json_from_value('["\\u003c/script\\u003e"]')
        self.assertEqual(str(result), '["\\u003c/script\\u003e"]')

    def test_embedding_in_script_block(self):
        """Test a realistic template interpolation."""
        data = json_from_value(json.dumps({"name": "</script><script>alert(1)//"}))
        page = f"<script>var data = {data};</script>"

        self.assertEqual(page.lower().count("</script"), 1)
        self.assertTrue(page.endswith(";</script>"))


class TestJavaScriptCompatibility(unittest.TestCase):
    """Test that output is also a valid JavaScript expression."""

    def test_line_terminators_escaped(self):
        """Test that raw line terminators never appear in output."""
        result = json_from_value('"a\u2028b\u2029c"')
        self.assertEqual(str(result), '"a\\u2028b\\u2029c"')

    def test_lone_surrogates_replaced(self):
        """Test that escaped lone surrogates do not survive re-emission."""
        result = json_from_value('["\\ud800", "\\udfff"]')
        self.assertEqual(json.loads(str(result)), ["\ufffd", "\ufffd"])

    def test_surrogate_pairs_preserved(self):
        """Test that escaped surrogate pairs decode to one character."""
        result = json_from_value('"\\ud83d\\ude00"')
        self.assertEqual(json.loads(str(result)), "😀")


class TestInterchangeValidity(unittest.TestCase):
    """Test that re-emitted output only holds interchange-valid characters."""

    def invalid_characters(self, text):
        return [hex(ord(char)) for char in text if not is_interchange_valid(char)]

    def test_escaped_input_characters(self):
        """Test characters that are valid JSON but not interchange-valid."""
        document = (
            '["\\u007f", "\\u0085", "\\u009f", "\\ufdd0", "\\ufdef",'
            ' "\\ufffe", "\\uffff", "\\ud83f\\udffe", "\\udbff\\udfff", "\\ud800"]'
        )
        for ensure_ascii in (False, True):
            with self.subTest(ensure_ascii=ensure_ascii):
                config = SafeJSONConfig(encoder=EncoderSettings(ensure_ascii=ensure_ascii))
                result = str(json_from_value(document, config))

                self.assertEqual(self.invalid_characters(result), [])
                expected = json.loads(document)
                expected[-1] = "\ufffd"
                self.assertEqual(json.loads(result), expected)

    def test_raw_input_characters(self):
        """Test the same characters written raw inside strings and keys."""
        chars = "\x7f\x85\ufdd0\ufffe\U0001fffe\U0010ffff"
        document = json.dumps({chars: chars}, ensure_ascii=False)
        result = str(json_from_value(document))

        self.assertEqual(self.invalid_characters(result), [])
        self.assertEqual(json.loads(result), {chars: chars})

    def test_escape_forms(self):
        """Test the escapes written for BMP and astral noncharacters."""
        self.assertEqual(str(json_from_value('"\\u0085"')), '"\\u0085"')
        self.assertEqual(str(json_from_value('"\\ud83f\\udfff"')), '"\\ud83f\\udfff"')


if __name__ == '__main__':
    unittest.main()
