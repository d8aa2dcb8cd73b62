import random

import pytest

from modules.passphrase.core.generate import PassphraseGenerator
from modules.passphrase.core.words import load_dict

SMALL_DICT = """\
4:able,bake,cave,dart,echo,fern,gale,hawk
5:amber,brisk,cider,dunes,ember,flint
6:anchor,bright,canyon,dragon
7:balance,harvest,morning
8:absolute,calendar,mountain
9:adventure,butterfly
10:basketball,lighthouse
"""


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def small_dictionary():
    return load_dict(SMALL_DICT)


@pytest.fixture
def generator(small_dictionary) -> PassphraseGenerator:
    return PassphraseGenerator(small_dictionary)
