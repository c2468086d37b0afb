#!/usr/bin/env python3
"""
Example usage of LightMap.

This script builds a nested map from one literal and shows the
derivation and conversion helpers.
"""

import logging
from lightmap import LightMap, LightMapParser


def main():
    """Main example function."""
    logging.basicConfig(level=logging.DEBUG)
    print("LightMap Example")
    print("=" * 50)

    users = LightMap([
        ["alice", [["age", 30], ["city", "New York"]]],
        ["carol", [["age", 41], ["city", "Boston"]]],
        ["bob", [["age", 25], ["city", "San Francisco"]]],
    ])

    print(f"Users: {users}")
    print(f"Count: {users.to_number()}")

    adults = users.filter(lambda profile, name, _: profile["age"] >= 30)
    print(f"30 and over: {list(adults.keys())}")

    cities = users.map(lambda profile, name, _: (name.title(), profile["city"]))
    print(f"Cities: {cities.to_object()}")

    total_age = users.reduce(lambda total, entry, *_: total + entry[1]["age"], 0)
    print(f"Total age: {total_age}")

    print(f"Sorted by name: {list(users.sort_keys().keys())}")
    print(f"Position of bob: {users.index_of('bob')}")

    template = LightMap([["{{ name }}", "LightMap"], ["{{ version }}", LightMap.version()]])
    print(template.substitute_into("Module: {{ name }} {{ version }}"))

    parser = LightMapParser()
    restored = parser.parse(users.to_string())
    print(f"Round trip equal: {restored == users}")


if __name__ == "__main__":
    main()
