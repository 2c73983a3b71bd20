import logging

import seqext


logging.basicConfig(level=logging.INFO)

text = """
the quick brown fox jumps over the lazy dog
the dog barks
a fox is quick
"""

lines = seqext.where_not(text.splitlines(), lambda line: line.strip() == "")
words = seqext.flat_map(lines, str.split)

by_length = seqext.group_by(words, len)
for length in sorted(by_length):
    print("{}: {}".format(length, ", ".join(by_length[length])))

counts = seqext.associate(
    seqext.group_by(words, lambda w: w).items(),
    lambda kv: {kv[0]: len(kv[1])})
print("most frequent word:", seqext.max_by(counts, counts.get))

short, longer = seqext.partition(counts, lambda w: len(w) <= 3)
print("short words:", short)
print("long words:", longer)

numbered = seqext.map_indexed(lines, lambda i, line: "{:>3} {}".format(i + 1, line))
seqext.for_each_indexed(numbered, lambda i, line: print(line))
