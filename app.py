"""

"""

# system
import sys
import argparse

# typing
from typing import Optional

# ui
import cmd2

# analysis
from nltk import FreqDist

# debugging
from icecream import ic

# custom
from segment.analyzing import Analyzer
from segment.tokenizing import TokenizationError, ensure_punkt
from segment.utils import Timer, read_lines
from segment.cmd_parsing import (
    make_analyzer,
    run_analyze_parser,
    run_analyze_file_parser,
    run_tokenize_parser,
    run_configure_parser,
)


class App(cmd2.Cmd):
    def __init__(self, analyzer: Analyzer = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.prompt = '>> '
        self.continuation_prompt = '... '
        self.analyzer = analyzer or Analyzer()

    @cmd2.with_argparser(run_analyze_parser)
    def do_analyze(self, args: argparse.Namespace) -> None:
        self.handle_analyze(' '.join(args.text), freq = args.freq)

    @cmd2.with_argparser(run_analyze_file_parser)
    def do_analyze_file(self, args: argparse.Namespace) -> None:
        lines = read_lines(args.source)
        with Timer() as t:
            try:
                results = self.analyzer.analyze_many(lines, progress = True)
            except TokenizationError as e:
                return self.perror(str(e))
        for tokens in results:
            self.poutput(' '.join(tokens))
        self.poutput(f'\n{len(lines)} lines in {round(float(t), 5)} secs\n')
    complete_analyze_file = cmd2.Cmd.path_complete

    @cmd2.with_argparser(run_tokenize_parser)
    def do_tokenize(self, args: argparse.Namespace) -> None:
        try:
            tokens = self.analyzer.tokenizer.tokenize(' '.join(args.text))
        except TokenizationError as e:
            return self.perror(str(e))
        self.poutput(' | '.join(tokens))

    @cmd2.with_argparser(run_configure_parser)
    def do_configure(self, args: argparse.Namespace) -> None:
        if args.sentences and not ensure_punkt():
            return self.perror('could not fetch the punkt_tab model')
        self.analyzer = make_analyzer(args)
        self.trace(vars(args))
        self.poutput('Analyzer rebuilt.')

    def handle_analyze(self, text: str, freq: bool = False) -> None:
        self.trace(text)
        with Timer() as t:
            try:
                tokens = self.analyzer.analyze(text)
            except TokenizationError as e:
                return self.perror(str(e))
        if not tokens: return self.poutput('\nNo content tokens.\n')
        self.poutput(' '.join(tokens))
        if freq:
            for token, count in FreqDist(tokens).most_common():
                self.poutput(f'{token}: {count}')
        self.poutput(f'\nCompleted in {round(float(t), 5)} secs\n')

    def trace(self, *values) -> None:
        """icecream output, shown only with `set debug true`."""
        if self.debug: ic(*values)

    def default(self, statement: cmd2.Statement) -> Optional[bool]:
        """Treats default command as text to analyze."""
        self.handle_analyze(statement.raw)

    @staticmethod
    def run(): sys.exit(App().cmdloop())


if __name__ == '__main__':
    App.run()
