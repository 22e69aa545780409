"""bindgen CLI entrypoint."""

import argparse
import sys
from typing import List, Optional

from bindgen.config import load_config
from bindgen.errors import BindgenError
from bindgen.layout import LayoutNames
from bindgen.naming import android_id, to_camel_case, to_camel_case_as_var, to_java_code
from bindgen.utils.logging import configure_logging
from bindgen.writer import FileSourceWriter


def cmd_camel(args: argparse.Namespace) -> int:
    convert = to_camel_case_as_var if args.var else to_camel_case
    print(convert(args.name))
    return 0


def cmd_java_name(args: argparse.Namespace) -> int:
    print(to_java_code(args.name))
    return 0


def cmd_android_id(args: argparse.Namespace) -> int:
    print(android_id(args.resource))
    return 0


def cmd_layout(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    if not args.verbose:
        configure_logging(level=config.logging.level)
    names = LayoutNames(class_suffix=config.class_suffix)
    package = config.module_package if args.package is None else args.package
    qualified_name = names.qualified_class_name(package, args.name)
    if args.path:
        print(FileSourceWriter(config.output_dir).path_for(qualified_name))
    else:
        print(qualified_name)
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    import bindgen

    print(f"bindgen {bindgen.__version__}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bindgen", description="Naming helpers for data-binding code generation"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    camel_parser = subparsers.add_parser("camel", help="Convert a snake_case name to camel case")
    camel_parser.add_argument("name", help="snake_case name")
    camel_parser.add_argument(
        "--var", action="store_true", help="Keep the first word lowercase (variable style)"
    )
    camel_parser.set_defaults(func=cmd_camel)

    java_parser = subparsers.add_parser("java-name", help="Convert a binary class name to source form")
    java_parser.add_argument("name", help="Binary class name, e.g. a.b.Outer$Inner")
    java_parser.set_defaults(func=cmd_java_name)

    id_parser = subparsers.add_parser("android-id", help="Extract the identifier of a resource reference")
    id_parser.add_argument("resource", help="Resource reference, e.g. @+id/title")
    id_parser.set_defaults(func=cmd_android_id)

    layout_parser = subparsers.add_parser("layout", help="Show the binding class for a layout")
    layout_parser.add_argument("name", help="Layout file name without extension")
    layout_parser.add_argument("--package", help="Module package (defaults to configuration)")
    layout_parser.add_argument("--config", help="Path to a YAML configuration file")
    layout_parser.add_argument(
        "--path", action="store_true", help="Print the output file path instead of the class name"
    )
    layout_parser.set_defaults(func=cmd_layout)

    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code for the shell
            - 0: Success
            - 1: Library error (printed to stderr)
            - 2: Incorrect usage (shows help)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        return 2

    if args.verbose:
        configure_logging(verbose=True)

    try:
        return args.func(args)
    except BindgenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
