import argparse
import sys

from hive_scripter.adaptor_factory import AdaptorFactory
from hive_scripter.common import log, get_fullname
from hive_scripter.ddl_objects import DataException
from hive_scripter.dumper import Dumper
from hive_scripter.options import Options, DumpOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hive Scripter")
    parser.add_argument('--connection-string',
                        help='Query tool connection string, hive://[executable] or beeline://<jdbc url>',
                        dest='connection_string',
                        default='hive://')
    parser.add_argument('--database',
                        help='Database to dump, repeatable, all databases when omitted',
                        dest='databases',
                        action='append')
    parser.add_argument('--output-file',
                        help='Script file, stdout when omitted',
                        dest='output_file')
    parser.add_argument('--output-dir',
                        help='Directory receiving one <database>.sql per database',
                        dest='output_dir')
    parser.add_argument('--clean',
                        help='Empty the output directory first',
                        action='store_true')
    parser.add_argument('--workers',
                        help='Parallel ddl fetches per database',
                        type=int,
                        default=1)
    parser.add_argument('--options',
                        help='Dump options as key=value;key=value',
                        default='')
    parser.add_argument('--quiet',
                        help='No progress output',
                        action='store_true')

    for flag in DumpOptions.__slots__:
        parser.add_argument('--' + flag.replace('_', '-'),
                            dest=flag,
                            action='store_true')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {flag: getattr(args, flag) for flag in DumpOptions.__slots__}
    options = DumpOptions.from_options(Options(args.options), **overrides)

    try:
        adaptor = AdaptorFactory.get_adaptor_for_connection_string(args.connection_string)
        dump(Dumper(adaptor, options, workers=args.workers, quiet=args.quiet), args)
    except DataException as e:
        log(str(e))
        sys.exit(1)


def dump(dumper: Dumper, args: argparse.Namespace):
    if args.output_dir:
        dumper.write_databases(get_fullname(args.output_dir), args.databases, clean=args.clean)
    elif args.output_file:
        script = dumper.dump_databases(args.databases)
        with open(get_fullname(args.output_file), "w", 1024, encoding="utf8") as f:
            f.write(script)
            f.flush()
    else:
        sys.stdout.write(dumper.dump_databases(args.databases))


if __name__ == "__main__":
    main()
