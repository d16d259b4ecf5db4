#! /usr/bin/env python3

"""base94 command-line interface

Encode a file of arbitrary bytes into base-N text, or decode such text
back into the original bytes.  Whole files are read into memory; there
is no streaming.

"""

import argparse
import sys

import base94

OPERATION_ENCODE = 'encode'
OPERATION_DECODE = 'decode'
OPERATIONS = (OPERATION_ENCODE, OPERATION_DECODE)

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def parse_base(text):
    """argparse type for --base: an integer within 2..94"""
    try:
        base = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid int value: '{}'".format(text))
    if not base94.MIN_BASE <= base <= base94.MAX_BASE:
        raise argparse.ArgumentTypeError(
            'Base must be between {} and {} (inclusive)'
            .format(base94.MIN_BASE, base94.MAX_BASE))
    return base


class Base94Converter:

    __slots__ = ('operation', 'input_pathname', 'output_pathname', 'base')

    def __init__(self):
        # See also .configure() when changing these values:
        self.operation = OPERATION_ENCODE
        self.input_pathname = None
        self.output_pathname = None
        self.base = base94.DEFAULT_BASE

    def main(self, argv=None):
        """Run once as configured by ARGV, defaulting to sys.argv.
        SIDE-EFFECTS: writes output file; exits non-zero on failure
        """
        self.configure(argv)
        try:
            self.convert()
        except (OSError, UnicodeDecodeError, base94.DecodeError) as error:
            print("error={} operation={} input={}"
                  .format(error, self.operation, self.input_pathname),
                  file=sys.stderr)
            sys.exit(EXIT_FAILURE)
        except KeyboardInterrupt:
            print("\nCaught keyboard interrupt.  Exiting.", file=sys.stderr)
            sys.exit(EXIT_INTERRUPTED)

    def configure(self, argv=None):
        args = self.parse_args(argv)
        # See also .__init__() when changing these values:
        self.operation = args.operation
        self.input_pathname = args.input
        self.output_pathname = args.output
        self.base = args.base

    def parse_args(self, argv=None):
        parser = argparse.ArgumentParser(
            prog='base94',
            description="Encode or decode files using base-N text, N from"
            " {} to {}".format(base94.MIN_BASE, base94.MAX_BASE),
            epilog='The same base must be given to decode as was used'
            ' to encode; a mismatch is not detected.')
        parser.add_argument('operation', choices=OPERATIONS,
                            help='Whether to encode or decode the input')
        parser.add_argument('input',
                            help='The input file to encode or decode')
        parser.add_argument('output',
                            help='The output file to write the result to')
        parser.add_argument('-b', '--base', dest='base', type=parse_base,
                            default=self.base,
                            help='The base to use for encoding or decoding;'
                            ' must be between {} and {} (inclusive)'
                            .format(base94.MIN_BASE, base94.MAX_BASE))
        parser.add_argument('--version', action='version',
                            version='%(prog)s ' + base94.__version__)
        args = parser.parse_args(argv)
        return args

    def convert(self):
        """Read entire input, transform it and write entire output.
        Returns: number of bytes written
        May raise OSError, UnicodeDecodeError or base94.DecodeError
        """
        with open(self.input_pathname, 'rb') as file:
            data = file.read()

        if self.operation == OPERATION_ENCODE:
            output = base94.encode(data, self.base).encode('ascii')
        else:
            output = base94.decode(data.decode('utf-8'), self.base)

        with open(self.output_pathname, 'wb') as file:
            file.write(output)

        print("{} base={} input={} ({} bytes) output={} ({} bytes)"
              .format(self.operation, self.base,
                      self.input_pathname, len(data),
                      self.output_pathname, len(output)),
              file=sys.stderr)
        return len(output)


def main():
    converter = Base94Converter()
    converter.main()

if __name__ == '__main__':
    main()
