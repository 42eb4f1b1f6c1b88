import collections
import seqops


text = """
the quick brown fox jumps over the lazy dog while the cat
watches the fox and the dog sleep under the old brown tree
"""

words = text.split()

print("distinct words:", seqops.joined_with_commas(seqops.removing_duplicates(words)))
print("most frequent:", seqops.mode(words))
print("longest / shortest:", tuple(seqops.longest_and_shortest(words)))

lengths = [len(w) for w in words]
print("average length: {:.2f}".format(seqops.average(lengths)))
print("median length:", seqops.median(lengths))
print("length range:", tuple(seqops.min_max(lengths)))

by_initial = seqops.grouped_by(words, lambda w: w[0])
counts = collections.OrderedDict(
    (k, len(v)) for k, v in sorted(by_initial.items()))
print("words by initial:", seqops.to_json_string([counts]))

short, long = seqops.partitioned(words, lambda w: len(w) <= 3)
print("{} short words, {} long words".format(len(short), len(long)))

for line in seqops.chunked(words, 6):
    print("  " + " ".join(line))

vocabulary = sorted(set(words))
position = seqops.insertion_index(vocabulary, "house")
print("'house' would go at position {} of the vocabulary".format(position))
