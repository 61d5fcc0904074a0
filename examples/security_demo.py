"""
Security features demonstration for safejson.
"""

import safejson
from safejson import ParseLimits, SafeJSONConfig, SecurityError


def main():
    print("safejson - Security Features Demo")
    print("=" * 40)

    # Example 1: Basic security limits
    print("\n1. Input Size Limits")
    config = SafeJSONConfig(limits=ParseLimits(max_input_size=100))

    try:
        result = safejson.json_from_value('{"test": "value"}', config)
        print(f"✓ Small input accepted: {result}")
    except Exception as e:
        print(f"✗ Error: {e}")

    try:
        large_input = '{"test": "' + 'x' * 200 + '"}'
        result = safejson.json_from_value(large_input, config)
        print(f"✗ Large input should have failed: {result}")
    except SecurityError as e:
        print(f"✓ Large input blocked: {type(e).__name__}")

    # Example 2: Nesting depth limits
    print("\n2. Nesting Depth Limits")
    config = SafeJSONConfig(limits=ParseLimits(max_nesting_depth=3))

    try:
        shallow = '{"a": {"b": {"c": "value"}}}'
        result = safejson.json_from_value(shallow, config)
        print(f"✓ Shallow nesting accepted: {result}")
    except Exception as e:
        print(f"✗ Error: {e}")

    try:
        deep = "[" * 100000 + "]" * 100000
        result = safejson.json_from_value(deep, config)
        print("✗ Deep nesting should have failed")
    except SecurityError as e:
        print(f"✓ Deep nesting blocked before parsing: {e.message}")

    # Example 3: Structure limits
    print("\n3. Object and Array Limits")
    config = SafeJSONConfig(limits=ParseLimits(max_object_keys=3, max_array_items=5))

    for text in ('{"a": 1, "b": 2, "c": 3}',
                 '{' + ', '.join(f'"{i}": {i}' for i in range(10)) + '}',
                 '[' + ', '.join(str(i) for i in range(10)) + ']'):
        value, error = safejson.try_json_from_value(text, config)
        if error is None:
            print(f"✓ Accepted: {value}")
        else:
            print(f"✓ Blocked: {error.message}")

    # Example 4: Strict preset for request bodies
    print("\n4. Strict Preset")
    strict = SafeJSONConfig.strict()
    body = '{"blob": "' + "x" * (100 * 1024) + '"}'
    _, error = safejson.try_json_from_value(body, strict)
    print(f"✓ 100KB string under strict(): {type(error).__name__}")

    # Example 5: Script breakout attempts
    print("\n5. Script Breakout Attempts")
    payloads = [
        '"</script><script>alert(1)</script>"',
        '"<!--"',
        '{"</script>": "key"}',
    ]
    for payload in payloads:
        result = safejson.json_from_value(payload)
        print(f"✓ {payload} -> {result}")

    # Example 6: Construction is guarded
    print("\n6. Guarded Construction")
    try:
        safejson.SafeJSON("<script>")  # type: ignore[call-arg]
    except TypeError as e:
        print(f"✓ Direct construction refused: {e}")

    try:
        safejson.json_concat(safejson.EMPTY_OBJECT, "<script>")  # type: ignore[arg-type]
    except TypeError as e:
        print(f"✓ Plain string concatenation refused: {e}")


if __name__ == "__main__":
    main()
