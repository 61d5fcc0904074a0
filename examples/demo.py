"""
safejson demonstration script.
"""

import safejson


def main():
    print("safejson - Safe JSON Construction Demo")
    print("=" * 40)

    # Parse-and-re-emit: untrusted text in, canonical JSON out
    examples = [
        ('{"a": 1, "b": [true, null]}', "Basic document"),
        ('{\n  "z": 1,\n  "a": 2\n}', "Reformatted and key-sorted"),
        ('{"comment": "</script><script>alert(1)</script>"}', "Markup inside a string"),
        ('{"sep": "line\u2028break"}', "JavaScript line terminator"),
        ("not json", "Invalid input"),
        ('{"a": 1,}', "Trailing comma"),
        ("[NaN]", "Non-standard constant"),
    ]

    for i, (json_str, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {json_str.strip()}")

        value, error = safejson.try_json_from_value(json_str)
        if error is None:
            print(f"Output: {value}")
        else:
            print(f"Error:  {error.message}")

    # Escaping runtime text
    print(f"\n{len(examples) + 1}. Escaped user text")
    name = "O'Brien <ob@example.com> \"the admin\""
    print(f"Input:  {name}")
    print(f"Body:   {safejson.json_escaped(name)}")
    print(f"String: {safejson.json_string(name)}")

    # Composing a document from trusted pieces
    print(f"\n{len(examples) + 2}. Composition")
    document = safejson.json_concat(
        safejson.json_from_constant('{"user":'),
        safejson.json_string(name),
        safejson.json_from_constant(',"settings":'),
        safejson.empty_object_json(),
        safejson.json_from_constant(',"items":'),
        safejson.empty_array_json(),
        safejson.json_from_constant("}"),
    )
    print(f"Output: {document}")
    print(f"Inline: <script>var data = {document};</script>")


if __name__ == "__main__":
    main()
