"""
jsonmend demonstration script.
"""

import jsonmend
from jsonmend import Failed, ResolveConfig


def main():
    print("jsonmend - LLM Response JSON Repair Demo")
    print("=" * 40)

    examples = [
        # Prose around the payload
        ('Here is your plan: {"a": 1, "b": [1,2,3]} Enjoy!', "Prose wrapping"),
        # Trailing comma
        ('{"a": 1, "b": 2,}', "Trailing comma"),
        # Token limit hit
        ('{"a": [1, 2, 3]', "Missing closing brace"),
        # Append-only repair cannot fix this
        ('{"a": 1, "b": [1, 2,}', "Array left open inside object"),
        # Refusal
        ("not json at all", "No JSON"),
        ("", "Empty response"),
    ]

    for i, (raw, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {raw!r}")

        outcome = jsonmend.resolve(raw, ResolveConfig(log_failures=False))
        if isinstance(outcome, Failed):
            print(f"Failed: {outcome.error}")
        else:
            actions = ", ".join(action.value for action in outcome.actions)
            print(f"Output: {outcome.value}")
            if outcome.repaired:
                print(f"Repair: {actions}")

    # Balanced extraction picks the first complete object
    print(f"\n{len(examples) + 1}. Two objects, balanced extraction")
    two_objects = 'Option A: {"plan": "A"} Option B: {"plan": "B"}'
    print(f"Input:  {two_objects!r}")
    print(f"Greedy:   {jsonmend.extract(two_objects)!r}")
    outcome = jsonmend.resolve(two_objects, ResolveConfig.balanced())
    print(f"Balanced: {outcome.unwrap_or(None)}")


if __name__ == "__main__":
    main()
