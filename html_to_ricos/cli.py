import argparse
import json
import sys

from html_to_ricos.converter import HTMLToRicos, to_json


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Convert HTML to Ricos JSON')
    parser.add_argument('html_file', help='Input HTML file')
    parser.add_argument('output_file', nargs='?', help='Output JSON file (optional, defaults to stdout)')
    parser.add_argument('-c', '--config', help='JSON config file path')
    parser.add_argument('--deterministic-ids', action='store_true',
                        help='Number node ids sequentially instead of randomly')
    parser.add_argument('--no-sanitize', action='store_true',
                        help='Skip sanitization (input is already clean)')
    parser.add_argument('--compact', action='store_true', help='Write JSON without indentation')
    args = parser.parse_args(argv)

    config = {}
    if args.config:
        try:
            with open(args.config, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (OSError, ValueError) as e:
            print(f"Error reading config file: {e}", file=sys.stderr)
            sys.exit(1)
    if args.deterministic_ids:
        config['deterministic_ids'] = True
    if args.no_sanitize:
        config['sanitize'] = False

    try:
        with open(args.html_file, 'r', encoding='utf-8') as f:
            html_content = f.read()
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        sys.exit(1)

    document = HTMLToRicos(html_content, config=config).convert()
    json_output = to_json(document, indent=None if args.compact else 2)

    if args.output_file:
        try:
            with open(args.output_file, 'w', encoding='utf-8') as f:
                f.write(json_output)
            print(f"Output saved to: {args.output_file}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output file: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(json_output)


if __name__ == '__main__':
    main()
