# oscy/__main__.py
"""
The main entry point: renders the configured generator to a WAV file.
"""
import argparse
import logging
import sys

from oscy.config.constants import CONFIG_FILE_PATH
from oscy.services.configuration_manager import ConfigurationManager
from oscy.services.renderer import describe_levels, render, write_wav


def main(argv=None) -> int:
    """Parses arguments, renders the configured wave, and writes it out."""
    parser = argparse.ArgumentParser(
        prog='oscy', description="Render an oscillator or noise generator "
                                 "to a WAV file.")
    parser.add_argument('--config', default=CONFIG_FILE_PATH,
                        help="YAML render settings (created if missing).")
    parser.add_argument('--output', default=None,
                        help="Override the configured output path.")
    parser.add_argument('--verbose', action='store_true',
                        help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(threadName)s] [%(levelname)s] - %(message)s',
        stream=sys.stdout
    )

    settings = ConfigurationManager().load_config(args.config)
    if args.output:
        settings['output_path'] = args.output

    samples = render(settings)
    try:
        write_wav(settings['output_path'], samples, settings['sample_rate'])
    except (IOError, ValueError) as e:
        logging.error("Could not write %s: %s", settings['output_path'], e)
        return 1

    peak, rms = describe_levels(samples)
    logging.info("Peak: %.4f, RMS: %.4f", peak, rms)
    return 0


if __name__ == '__main__':
    sys.exit(main())
