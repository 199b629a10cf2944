import sys
from argparse import ArgumentParser
from pathlib import Path

from juliaset import JuliaRenderError, RenderParameters, render_frame

WIDTH = 3840
HEIGHT = 2160
MAX_ITERATIONS = 100

C = complex(-0.6000935097734532, -0.427862402050194)

OUTPUT_PATH = Path("output.png")

VERBOSE = False


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


def build_parser():
    parser = ArgumentParser(
        description='Render a Julia set to %s using every available CPU core.' % OUTPUT_PATH,
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print render parameters, progress and timing.')
    return parser


def report_progress(received, expected):
    log("pixel {0} out of {1}".format(received, expected), end='\r')


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = bool(opt.verbose)

    params = RenderParameters(
        width=WIDTH,
        height=HEIGHT,
        max_iterations=MAX_ITERATIONS,
        c=C,
    )
    log("Rendering %dx%d, c=%s, max_iterations=%d" % (params.width, params.height, params.c, params.max_iterations))

    try:
        result = render_frame(params, progress=report_progress)
        log("")
        log("Assembled %d pixels from %d rows on %d workers in %.2fs"
            % (result.pixels_received, result.rows_dispatched, result.workers, result.elapsed_seconds))
        result.save(OUTPUT_PATH)
    except JuliaRenderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    log("Image saved to %s" % OUTPUT_PATH)
    return 0


if __name__ == '__main__':
    sys.exit(main())
