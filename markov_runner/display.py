import sys
import time
from itertools import islice

import numpy as np

from markov_runner import run, steps

DEFAULT_DELAY = 0.5

# https://pico-8.fandom.com/wiki/Palette
PICO8_PALETTE = np.array(
    [
        [0, 0, 0],
        [255, 241, 232],
        [255, 0, 7],
        [29, 43, 83],
        [126, 37, 83],
        [0, 135, 81],
        [171, 82, 54],
        [95, 87, 79],
        [194, 195, 199],
        [255, 163, 0],
        [255, 236, 39],
        [0, 228, 54],
        [41, 173, 255],
        [131, 118, 156],
        [255, 119, 168],
        [255, 204, 170],
    ],
    dtype=np.uint8,
)

CLEAR_LINE = "\r\x1b[2K"


def _steps(input, node, max_steps):
    if max_steps is None:
        return steps(input, node)
    return islice(steps(input, node), max_steps)


def evolutive(input, node, delay=DEFAULT_DELAY, out=None, max_steps=None):
    out = sys.stdout if out is None else out
    history = [input]
    for result in _steps(input, node, max_steps):
        history.append(result)
        out.write(CLEAR_LINE + result)
        out.flush()
        time.sleep(delay)
    out.write("\n")
    out.flush()
    return history


def all_steps(input, node, out=None, max_steps=None):
    out = sys.stdout if out is None else out
    history = [input]
    for result in _steps(input, node, max_steps):
        history.append(result)
        out.write(result + "\n")
    out.flush()
    return history


def final_result(input, node, out=None, max_steps=None):
    out = sys.stdout if out is None else out
    history = [input]
    if max_steps is None:
        result = run(input, node, callback=lambda index, s: history.append(s))
    else:
        history.extend(_steps(input, node, max_steps))
        result = history[-1]
    out.write(result + "\n")
    out.flush()
    return history


DISPLAY_METHODS = {
    "evolutive": evolutive,
    "all-steps": all_steps,
    "final-result": final_result,
}


def history_to_array(history):
    # Index 0 is left for padding, characters get palette entries in order of
    # first appearance. The palette has 15 foreground colours, so the 16th
    # distinct character reuses the first character's colour.
    width = max((len(row) for row in history), default=0)
    arr = np.zeros((len(history), width), dtype=np.uint8)
    values = {}
    for y, row in enumerate(history):
        for x, char in enumerate(row):
            if char not in values:
                values[char] = len(values) % (len(PICO8_PALETTE) - 1) + 1
            arr[y, x] = values[char]
    return arr


def colour_image(arr, palette=PICO8_PALETTE):
    return palette[arr]


def save_image(filename, history, palette=PICO8_PALETTE):
    from PIL import Image

    arr = history_to_array(history)
    if arr.size == 0:
        raise ValueError("nothing to draw")
    Image.fromarray(colour_image(arr, palette)).save(filename)
