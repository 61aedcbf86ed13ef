from tinyparsec.Char import integer, removing_literal, substring
from tinyparsec.Prim import zip2, zip3


class TimePerson:
    def setup(self):
        name = zip2(removing_literal("name: "), substring(str.isalpha)).map(lambda r: r[1])
        age = zip2(removing_literal("age: "), integer()).map(lambda r: r[1])
        self.parser = zip3(name, removing_literal(", "), age)
        self.short = "name: John, age: 90"
        self.long_name = "name: " + "J" * 100000 + ", age: 90"
        self.long_age = "name: John, age: " + "9" * 4000

    def time_person_short(self):
        self.parser.run(self.short)

    def time_person_long_name(self):
        self.parser.run(self.long_name)

    def time_person_long_age(self):
        self.parser.run(self.long_age)
