import random

# Word lists for generated cluster names such as "pinkcougar"
ADJECTIVES = (
    "amber", "bashful", "brave", "breezy", "bright", "calm", "chartreuse",
    "cheerful", "clever", "cosmic", "crimson", "curious", "dizzy", "eager",
    "fancy", "fluffy", "frosty", "gentle", "giddy", "golden", "grumpy",
    "happy", "jolly", "lucky", "mellow", "misty", "nimble", "olive", "pink",
    "plucky", "quiet", "rapid", "rusty", "shiny", "silly", "sleepy",
    "snappy", "sunny", "swift", "teal", "tidy", "violet", "witty", "zany",
)

NOUNS = (
    "badger", "beaver", "bison", "bubble", "cactus", "comet", "cougar",
    "coyote", "dingo", "dolphin", "falcon", "ferret", "gecko", "goblin",
    "heron", "iguana", "jackal", "koala", "lemur", "lynx", "mango", "marmot",
    "meerkat", "moose", "narwhal", "ocelot", "otter", "panda", "pebble",
    "pelican", "penguin", "puffin", "quokka", "raccoon", "rocket", "salmon",
    "sparrow", "squid", "tapir", "toucan", "walrus", "wombat", "yak", "zebra",
)


def generate_cluster_name(rng: random.Random | None = None) -> str:
    """Returns a random lowercase two-word name, valid as a GKE cluster name."""
    rng = rng or random.Random()
    return f"{rng.choice(ADJECTIVES)}{rng.choice(NOUNS)}".lower()
