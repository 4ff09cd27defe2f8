ONES = ['', 'one', 'two', 'three', 'four', 'five', 'six', 'seven', 'eight', 'nine']
TEENS = ['ten', 'eleven', 'twelve', 'thirteen', 'fourteen', 'fifteen',
         'sixteen', 'seventeen', 'eighteen', 'nineteen']
TENS = ['', '', 'twenty', 'thirty', 'forty', 'fifty', 'sixty', 'seventy', 'eighty', 'ninety']
SCALES = ['', 'thousand', 'million', 'billion', 'trillion', 'quadrillion',
          'quintillion', 'sextillion', 'septillion', 'octillion', 'nonillion', 'decillion']

ROMAN_NUMERALS = [
    (1000, 'M'), (900, 'CM'), (500, 'D'), (400, 'CD'),
    (100, 'C'), (90, 'XC'), (50, 'L'), (40, 'XL'),
    (10, 'X'), (9, 'IX'), (5, 'V'), (4, 'IV'), (1, 'I'),
]
ROMAN_OUT_OF_RANGE = "Number out of range (1-3999)"


def _chunk_to_english(n: int) -> str:
    words = []
    if n >= 100:
        words.append(f"{ONES[n // 100]} hundred")
        n %= 100
    if n >= 20:
        tens_word = TENS[n // 10]
        words.append(f"{tens_word}-{ONES[n % 10]}" if n % 10 else tens_word)
    elif n >= 10:
        words.append(TEENS[n - 10])
    elif n > 0:
        words.append(ONES[n])
    return ' '.join(words)


def number_to_english(n: int) -> str:
    if n == 0:
        return "zero"
    if n < 0:
        return "negative " + number_to_english(-n)

    # Past decillion, split off the high part and name it in decillions.
    top = 1000 ** (len(SCALES) - 1)
    if n >= top * 1000:
        high, low = divmod(n, top)
        words = f"{number_to_english(high)} {SCALES[-1]}"
        return f"{words} {number_to_english(low)}" if low else words

    chunks = []
    scale_index = 0
    while n > 0:
        n, chunk = divmod(n, 1000)
        if chunk:
            chunk_str = _chunk_to_english(chunk)
            if scale_index:
                chunk_str += ' ' + SCALES[scale_index]
            chunks.append(chunk_str)
        scale_index += 1
    return ' '.join(reversed(chunks))


def number_to_roman(n: int) -> str:
    if n <= 0 or n > 3999:
        return ROMAN_OUT_OF_RANGE
    result = []
    for value, numeral in ROMAN_NUMERALS:
        while n >= value:
            result.append(numeral)
            n -= value
    return ''.join(result)
