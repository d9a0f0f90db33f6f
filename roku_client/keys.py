"""Remote control key names understood by the ECP keypress endpoints.

Named keys are sent as-is. Letter and digit members hold a single
character, which the client turns into a ``Lit_`` literal before sending.
"""

from __future__ import annotations

from enum import StrEnum

__all__ = ["Key"]


class Key(StrEnum):
    """Keys of the Roku remote (and Roku TV extras)."""

    # Navigation
    HOME = "Home"
    BACK = "Back"
    SELECT = "Select"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    INFO = "Info"
    BACKSPACE = "Backspace"
    SEARCH = "Search"
    ENTER = "Enter"
    FIND_REMOTE = "FindRemote"

    # Playback
    PLAY = "Play"
    REVERSE = "Rev"
    FORWARD = "Fwd"
    INSTANT_REPLAY = "InstantReplay"

    # Volume (Roku TV / soundbar)
    VOLUME_UP = "VolumeUp"
    VOLUME_DOWN = "VolumeDown"
    VOLUME_MUTE = "VolumeMute"

    # Power
    POWER = "Power"
    POWER_OFF = "PowerOff"
    POWER_ON = "PowerOn"

    # Tuner and inputs
    CHANNEL_UP = "ChannelUp"
    CHANNEL_DOWN = "ChannelDown"
    INPUT_TUNER = "InputTuner"
    INPUT_HDMI1 = "InputHDMI1"
    INPUT_HDMI2 = "InputHDMI2"
    INPUT_HDMI3 = "InputHDMI3"
    INPUT_HDMI4 = "InputHDMI4"
    INPUT_AV1 = "InputAV1"

    # Letters
    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"  # noqa: E741
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"  # noqa: E741
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"

    # Digits
    NUM_0 = "0"
    NUM_1 = "1"
    NUM_2 = "2"
    NUM_3 = "3"
    NUM_4 = "4"
    NUM_5 = "5"
    NUM_6 = "6"
    NUM_7 = "7"
    NUM_8 = "8"
    NUM_9 = "9"
