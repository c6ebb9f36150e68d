"""Command-line front ends.

``beep`` makes a single beep and ``beep-melody`` plays an RTTTL melody,
both on a beeper exposed as ``/dev/input/eventN``.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from rtttl_beep.errors import HeaderError, SinkError
from rtttl_beep.melodies import get_melody, get_melody_names
from rtttl_beep.models import BeepParams, DeviceParams, PlaybackParams, PlayerParams
from rtttl_beep.music_utils import get_key_name
from rtttl_beep.player import decode_melody, play
from rtttl_beep.sinks import EvdevToneSink, MidiFileSink

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _init_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-e",
        "--event",
        type=int,
        default=0,
        metavar="N",
        help="input event number (/dev/input/eventN). Default is 0",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log progress (-v) or every note (-vv)",
    )


def build_beep_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beep",
        description="Make beep by sending input event to beeper.",
    )
    parser.add_argument(
        "-f",
        "--frequency",
        type=int,
        default=0,
        metavar="HZ",
        help="beep frequency (tone) in HZ. Default is the device bell",
    )
    parser.add_argument(
        "-d",
        "--duration",
        type=int,
        default=200,
        metavar="MS",
        help="duration in milliseconds. Default is 200ms",
    )
    _add_common_arguments(parser)
    return parser


def build_melody_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beep-melody",
        description="Play an RTTTL melody on beeper.",
    )
    parser.add_argument(
        "melody",
        nargs="?",
        default="tetris",
        help=(
            "RTTTL string (name:d=4,o=5,b=120:notes) or a built-in melody "
            f"({', '.join(get_melody_names())}). Default is tetris"
        ),
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="print the decoded notes instead of playing them",
    )
    parser.add_argument(
        "--midi",
        metavar="PATH",
        help="write the melody to a MIDI file instead of playing it",
    )
    _add_common_arguments(parser)
    return parser


def resolve_melody(melody: str) -> str:
    """Return ``melody`` itself if it is an RTTTL string, else a built-in one.

    Raises:
        KeyError: If ``melody`` is neither RTTTL nor a built-in name.
    """
    if ":" in melody:
        return melody
    return get_melody(melody)


def _print_events(melody: str, params: PlayerParams) -> None:
    decoded = decode_melody(melody, params)
    defaults = decoded.defaults
    print(
        f"{decoded.name or '(unnamed)'}: o={defaults.octave} "
        f"d={defaults.duration_code} b={defaults.tempo_bpm}"
    )
    for i, event in enumerate(decoded.events):
        print(
            f"{i:4d}  {get_key_name(event.frequency_hz):>4}  "
            f"{event.frequency_hz:5d} Hz  {event.duration_us:8d} us"
        )
    print(
        f"{len(decoded.events)} notes, {decoded.skipped} skipped, "
        f"{decoded.total_duration_us / 1_000_000:.2f} s"
    )


def beep_main(argv: list[str] | None = None) -> int:
    args = build_beep_parser().parse_args(argv)
    _init_logging(args.verbose)

    try:
        params = PlaybackParams(
            device=DeviceParams(event_number=args.event),
            beep=BeepParams(frequency_hz=args.frequency, duration_ms=args.duration),
        )
    except ValidationError as e:
        print(f"Invalid option: {e}", file=sys.stderr)
        return 1

    duration_us = params.beep.duration_ms * 1000
    try:
        with EvdevToneSink.open(params.device) as sink:
            if params.beep.frequency_hz:
                sink.emit(params.beep.frequency_hz, duration_us)
            else:
                sink.bell(duration_us)
    except SinkError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


def melody_main(argv: list[str] | None = None) -> int:
    args = build_melody_parser().parse_args(argv)
    _init_logging(args.verbose)

    try:
        params = PlaybackParams(device=DeviceParams(event_number=args.event))
    except ValidationError as e:
        print(f"Invalid option: {e}", file=sys.stderr)
        return 1

    try:
        melody = resolve_melody(args.melody)
    except KeyError:
        print(f"Unknown melody {args.melody!r}. Use '-h' for help", file=sys.stderr)
        return 1

    try:
        if args.list:
            _print_events(melody, params.player)
        elif args.midi:
            sink = MidiFileSink()
            play(sink, melody, params.player, sleep=sink.advance)
            sink.save(args.midi)
        else:
            with EvdevToneSink.open(params.device) as sink:
                play(sink, melody, params.player)
    except HeaderError as e:
        print(f"Invalid melody: {e}", file=sys.stderr)
        return 1
    except (SinkError, OSError) as e:
        logger.debug("Playback failed", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(melody_main())
