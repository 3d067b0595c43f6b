from presetlib.utils import pick

ADJECTIVES = [
    'able', 'absent', 'acoustic', 'active', 'airy', 'ancient', 'angry',
    'bold', 'brave', 'breezy', 'bright', 'brisk', 'broken', 'bumpy',
    'calm', 'careful', 'chilly', 'clever', 'cloudy', 'cosmic', 'crazy',
    'crisp', 'curly', 'dark', 'deep', 'dizzy', 'dreamy', 'dusty', 'eager',
    'early', 'electric', 'empty', 'endless', 'fancy', 'fast', 'fierce',
    'fluffy', 'foggy', 'frozen', 'fuzzy', 'gentle', 'giant', 'glassy',
    'golden', 'grumpy', 'happy', 'hollow', 'huge', 'hungry', 'icy',
    'jolly', 'lazy', 'liquid', 'little', 'lonely', 'loud', 'lucky',
    'mellow', 'mighty', 'misty', 'modern', 'muddy', 'narrow', 'nervous',
    'noisy', 'odd', 'old', 'patient', 'plain', 'polite', 'proud', 'quick',
    'quiet', 'rapid', 'rare', 'restless', 'rough', 'round', 'rusty',
    'sandy', 'shaky', 'sharp', 'shiny', 'silent', 'silky', 'sleepy',
    'slow', 'small', 'smooth', 'soft', 'solid', 'sparkly', 'spicy',
    'steady', 'sticky', 'stormy', 'strange', 'sunny', 'sweet', 'swift',
    'tall', 'tender', 'thick', 'thin', 'tidy', 'tiny', 'twisted', 'vast',
    'velvet', 'warm', 'weird', 'wild', 'windy', 'wise', 'wooden', 'young',
]

COLORS = [
    'amaranth', 'amber', 'amethyst', 'apricot', 'aqua', 'aquamarine',
    'azure', 'beige', 'black', 'blue', 'blush', 'bronze', 'brown',
    'chocolate', 'coffee', 'copper', 'coral', 'crimson', 'cyan',
    'emerald', 'fuchsia', 'gold', 'gray', 'green', 'harlequin', 'indigo',
    'ivory', 'jade', 'lavender', 'lime', 'magenta', 'maroon', 'moccasin',
    'olive', 'orange', 'peach', 'pink', 'plum', 'purple', 'red', 'rose',
    'ruby', 'salmon', 'sapphire', 'scarlet', 'silver', 'tan', 'teal',
    'tomato', 'turquoise', 'violet', 'white', 'yellow',
]

NAMES = [
    'Ada', 'Alan', 'Alma', 'Anna', 'Arlo', 'Bea', 'Ben', 'Carla', 'Cleo',
    'Dana', 'Dario', 'Eddie', 'Elsa', 'Emil', 'Eva', 'Felix', 'Flora',
    'Frida', 'Gus', 'Hana', 'Hugo', 'Ida', 'Igor', 'Iris', 'Jack',
    'Jonas', 'Juno', 'Kai', 'Karl', 'Lena', 'Leo', 'Lola', 'Luca',
    'Mara', 'Milo', 'Mina', 'Nico', 'Nina', 'Olga', 'Oscar', 'Otto',
    'Pia', 'Quinn', 'Rita', 'Rosa', 'Ruben', 'Sami', 'Sofia', 'Theo',
    'Tilda', 'Uma', 'Urs', 'Vera', 'Viktor', 'Wanda', 'Xena', 'Yara',
    'Yuri', 'Zoe',
]


def random_name(dictionaries=(ADJECTIVES, COLORS, NAMES), rng=None):
    """One capitalized word from each dictionary, space separated."""
    return ' '.join(pick(words, rng).capitalize() for words in dictionaries)
