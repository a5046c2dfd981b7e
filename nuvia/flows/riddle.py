"""Riddle flow - Picks a riddle from the built-in bank, avoiding recently shown ones."""

import random

from nuvia.models.game import GetRiddleInput, Riddle

RIDDLES: list[Riddle] = [
    Riddle(id="1", question="I speak without a mouth and hear without ears. I have no body, but I come alive with wind. What am I?", answer="An echo", difficulty="medium"),
    Riddle(id="2", question="What comes once in a minute, twice in a moment, but never in a thousand years?", answer="The letter M", difficulty="medium"),
    Riddle(id="3", question="I have keys but no locks. I have space but no room. You can enter but can't go outside. What am I?", answer="A keyboard", difficulty="easy"),
    Riddle(id="4", question="What has an eye, but cannot see?", answer="A needle", difficulty="easy"),
    Riddle(id="5", question="What is full of holes but still holds water?", answer="A sponge", difficulty="easy"),
    Riddle(id="6", question="What is always in front of you but can't be seen?", answer="The future", difficulty="medium"),
    Riddle(id="7", question="What has to be broken before you can use it?", answer="An egg", difficulty="easy"),
    Riddle(id="8", question="What has many teeth, but cannot bite?", answer="A comb", difficulty="easy"),
    Riddle(id="9", question="What is so fragile that saying its name breaks it?", answer="Silence", difficulty="medium"),
    Riddle(id="10", question="What can you catch, but not throw?", answer="A cold", difficulty="easy"),
    Riddle(id="11", question="What has an endless supply of letters, but starts empty?", answer="A mailbox", difficulty="medium"),
    Riddle(id="12", question="What is always coming, but never arrives?", answer="Tomorrow", difficulty="easy"),
    Riddle(id="13", question="What has one head, one foot, and four legs?", answer="A bed", difficulty="easy"),
    Riddle(id="14", question="What can travel around the world while staying in a corner?", answer="A stamp", difficulty="medium"),
    Riddle(id="15", question="What has cities, but no houses; forests, but no trees; and water, but no fish?", answer="A map", difficulty="medium"),
    Riddle(id="16", question="What has a neck without a head, a body without legs?", answer="A bottle", difficulty="easy"),
    Riddle(id="17", question="What building has the most stories?", answer="A library", difficulty="easy"),
    Riddle(id="18", question="What is taken before you get it?", answer="Your picture", difficulty="medium"),
    Riddle(id="19", question="What is lighter than a feather, but even the world's strongest person can't hold it for five minutes?", answer="Your breath", difficulty="medium"),
    Riddle(id="20", question="What gets wetter the more it dries?", answer="A towel", difficulty="easy"),
    Riddle(id="21", question="I'm tall when I'm young, and I'm short when I'm old. What am I?", answer="A candle", difficulty="easy"),
    Riddle(id="22", question="What is at the end of a rainbow?", answer="The letter W", difficulty="medium"),
    Riddle(id="23", question="What has many rings but no fingers?", answer="A telephone", difficulty="easy"),
    Riddle(id="24", question="What goes up but never comes down?", answer="Your age", difficulty="easy"),
    Riddle(id="25", question="What has a thumb and four fingers but is not alive?", answer="A glove", difficulty="easy"),
]


def get_riddle(
    riddle_input: GetRiddleInput | None = None,
    rng: random.Random | None = None,
) -> Riddle:
    """
    Return a random riddle that is not in ``exclude_ids``.

    When every riddle has been excluded the whole bank becomes available
    again, so callers can cycle through it indefinitely.

    Args:
        riddle_input: Optional ids to exclude
        rng: Random source (module-level random when omitted)

    Returns:
        The selected Riddle
    """
    exclude = set((riddle_input.exclude_ids or []) if riddle_input else [])
    available = [r for r in RIDDLES if r.id not in exclude]

    # Everything shown already: start over with the full bank
    if not available:
        available = RIDDLES

    chooser = rng or random
    return chooser.choice(available).model_copy()
