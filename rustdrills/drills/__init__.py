"""Worked drills on conversions, errors, iterators, enums, structs and more."""