"""
Enhanced error reporting demonstration for safejson.
"""

import logging

import safejson
from safejson import ErrorReporting, ParseError, SafeJSONConfig


def main():
    print("safejson - Error Reporting Demo")
    print("=" * 45)

    # Example 1: Error with position, context and suggestions
    print("\n1. Error with Context")
    try:
        safejson.json_from_value('{\n  "name": "value",\n  "count": NaN\n}')
    except ParseError as e:
        print("Error caught:")
        print(str(e))

    # Example 2: Common mistakes
    print("\n2. Common Mistakes")
    for text in ("{'key': 'value'}", '{"items": [1, 2,]}', '{"open": "string',
                 '{"flag": True}'):
        _, error = safejson.try_json_from_value(text)
        print(f"\nInput: {text}")
        print(f"  {error.message}")
        for suggestion in error.suggestions:
            print(f"  -> {suggestion}")

    # Example 3: Context switched off for sensitive input
    print("\n3. Errors Without Context")
    config = SafeJSONConfig(error_reporting=ErrorReporting(include_context=False))
    _, error = safejson.try_json_from_value('{"token": "s3cr3t",}', config)
    print(str(error))

    # Example 4: Rejections are logged at DEBUG without the input
    print("\n4. Logging")
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")
    safejson.try_json_from_value('{"password": "hunter2"')


if __name__ == "__main__":
    main()
