"""

"""

import sys
from nltk import FreqDist
from icecream import ic

from segment.tokenizing import TokenizationError, ensure_punkt
from segment.cmd_parsing import make_argparser, make_analyzer
from segment.utils import Timer, read_lines


def print_freq(tokens: list[str]) -> None:
    for token, count in FreqDist(tokens).most_common():
        print(f'{token}: {count}')


def main() -> None:
    argparser = make_argparser()
    args = argparser.parse_args()
    if not args.debug: ic.disable()

    if args.sentences and not ensure_punkt():
        sys.exit('could not fetch the punkt_tab model')
    analyzer = make_analyzer(args)

    if not (args.text or args.input):
        from app import App
        app = App(analyzer = analyzer, allow_cli_args = False)
        app.debug = args.debug
        sys.exit(app.cmdloop())

    texts = [args.text] if args.text else read_lines(args.input)
    with Timer() as t:
        try:
            results = analyzer.analyze_many(texts, progress = bool(args.input))
        except TokenizationError as e:
            print(e, file = sys.stderr)
            sys.exit(1)

    for tokens in results:
        print(' '.join(tokens))
    if args.freq:
        print_freq([token for tokens in results for token in tokens])
    ic(len(texts), round(float(t), 3))


if __name__ == '__main__':
    main()
