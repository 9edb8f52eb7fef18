"""

"""

import argparse
import cmd2

from segment.analyzing import Analyzer
from segment.tokenizing import Tokenizer
from segment.utils import is_path


def validate_path(path: str) -> str:
    if not is_path(path): raise argparse.ArgumentTypeError(f'no such file: {path}')
    return path


def add_pipeline_options(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        '--no-sentences',
        dest = 'sentences',
        action = 'store_false',
        help = 'tokenize the text as one line, skipping punkt sentence splitting',
    )
    parser.add_argument(
        '--language',
        '-l',
        default = 'english',
        help = 'sentence splitting language',
    )
    parser.add_argument(
        '--ascii',
        '-a',
        action = 'store_true',
        help = 'transliterate tokens to ascii',
    )
    parser.add_argument(
        '--raw-quotes',
        action = 'store_true',
        help = 'do not fold typographic quotes before tokenizing',
    )
    return parser


def make_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(description = 'english text analyzer')
    argparser.add_argument('--text', '-t', help = 'text to analyze')
    argparser.add_argument('--input', '-i', type = validate_path, help = 'file to analyze line by line')
    argparser.add_argument('--freq', '-f', action = 'store_true', help = 'print token frequencies')
    argparser.add_argument('--debug', action = 'store_true', help = 'print debugging traces')
    return add_pipeline_options(argparser)


# ANALYZE
run_analyze_parser = cmd2.Cmd2ArgumentParser(description = 'analyze text')
run_analyze_parser.add_argument(
    'text',
    nargs = '+',
    help = 'text to analyze',
)
run_analyze_parser.add_argument(
    '--freq',
    '-f',
    action = 'store_true',
    help = 'print token frequencies',
)

run_analyze_file_parser = cmd2.Cmd2ArgumentParser(description = 'analyze a file line by line')
run_analyze_file_parser.add_argument(
    'source',
    type = validate_path,
    help = 'path to text file',
)

# TOKENIZE
run_tokenize_parser = cmd2.Cmd2ArgumentParser(description = 'show raw tokenizer output')
run_tokenize_parser.add_argument(
    'text',
    nargs = '+',
    help = 'text to tokenize',
)

# CONFIGURE
run_configure_parser = add_pipeline_options(
    cmd2.Cmd2ArgumentParser(description = 'rebuild the analyzer with new options')
)


def make_analyzer(args: argparse.Namespace) -> Analyzer:
    tokenizer = Tokenizer(
        split_sentences = args.sentences,
        language = args.language,
        fold_quotes = not args.raw_quotes,
    )
    return Analyzer(tokenizer = tokenizer, fold_ascii = args.ascii)
