# wavspec entry point: paths and sizes come from wavspec/config.py
import logging
import sys

from wavspec.config import DEBUG_MODE, SpectrogramConfig
from wavspec.errors import WavspecError
from wavspec.pipeline import run


def main() -> int:
    logging.basicConfig(
        level=logging.DEBUG if DEBUG_MODE else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = SpectrogramConfig.from_defaults()
        spectrogram = run(config)
    except WavspecError as e:
        print(f"[wavspec] Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("[wavspec] Interrupted", file=sys.stderr)
        return 130

    print(f"[wavspec] {spectrogram.shape[0]} frames")
    print(f"[wavspec] Spectrogram image saved to {config.output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
