from dataclasses import dataclass

from tinyparsec.Char import integer, removing_literal, substring
from tinyparsec.Parsec import ParseError
from tinyparsec.Prim import zip2, zip3


@dataclass
class Person:
    name: str
    age: int


# "name: John" -> "John"
name_parser = zip2(removing_literal("name: "), substring(str.isalpha)).map(lambda r: r[1])

# "age: 90" -> 90
age_parser = zip2(removing_literal("age: "), integer()).map(lambda r: r[1])

person_parser = zip3(name_parser, removing_literal(", "), age_parser).map(
    lambda r: Person(name=r[0], age=r[2])
)


if __name__ == "__main__":
    test_cases = [
        "name: John, age: 90",
        "name: Ada, age: 36 and more",
        "name: John, age: ninety",
    ]

    for text in test_cases:
        try:
            person, rest = person_parser.run(text)
            print(f"{text!r:<32} | {person} rest={rest!r}")
        except ParseError as e:
            print(f"{text!r:<32} | {e}")
