"""Command-line interface for the Meshtastic Relay."""

import argparse
import logging
import signal
import sys
from dataclasses import replace

from .config import Config, load_config
from .core import ConfigurationError, MODES
from .relay import MessageRelay, formatter_from_config
from .transport import MAX_PAYLOAD_BYTES, MeshtasticTransport


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Meshtastic Relay - Send text over mesh radio within its size limits",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "hello mesh"                   # Broadcast a message
  cat notes.txt | %(prog)s --mode lines   # Send each line as its own message
  %(prog)s -d '!abcd1234' "hi"            # Send to a single node
  %(prog)s --dry-run -s 20 "long text"    # Show the fragments without sending
  %(prog)s --tcp 192.168.1.100 --listen   # Print incoming mesh text
""",
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Message text (read from stdin when omitted)",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-d", "--dest",
        metavar="NODE",
        help="Destination node ID (default: ^all broadcast)",
    )

    parser.add_argument(
        "-s", "--max-size",
        metavar="BYTES",
        type=int,
        help="Maximum bytes per message",
    )

    parser.add_argument(
        "--split-max",
        metavar="N",
        type=int,
        help="Maximum messages a single input may be split into",
    )

    parser.add_argument(
        "--mode",
        choices=MODES,
        help="How to cut up long text",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the messages that would be sent and exit",
    )

    parser.add_argument(
        "--listen",
        action="store_true",
        help="Keep running and print incoming messages",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    # Connection options (mutually exclusive)
    conn_group = parser.add_mutually_exclusive_group()
    conn_group.add_argument(
        "--serial",
        metavar="PORT",
        nargs="?",
        const="auto",
        help="Use serial connection (default: auto-detect)",
    )
    conn_group.add_argument(
        "--ble",
        metavar="ADDRESS",
        help="Use Bluetooth LE connection",
    )
    conn_group.add_argument(
        "--tcp",
        metavar="HOST",
        help="Use TCP connection",
    )

    return parser.parse_args()


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Override config values with those given on the command line."""
    if args.dest:
        config = replace(config, destination=args.dest)
    if args.max_size is not None:
        config = replace(config, max_message_size=args.max_size)
    if args.split_max is not None:
        config = replace(config, split_max=args.split_max)
    if args.mode:
        config = replace(config, mode=args.mode)

    if args.serial is not None:
        device = None if args.serial == "auto" else args.serial
        config = replace(config, connection_type="serial", device=device)
    elif args.ble:
        config = replace(config, connection_type="ble", device=args.ble)
    elif args.tcp:
        config = replace(config, connection_type="tcp", device=args.tcp)

    return config


def print_incoming(node_id: str, text: str) -> None:
    """Write an incoming message to stdout."""
    print(f"{node_id}: {text}", flush=True)


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
    else:
        config = Config()

    config = apply_overrides(config, args)

    if args.text:
        text = " ".join(args.text)
    elif args.listen:
        text = ""
    else:
        text = sys.stdin.read()

    if config.max_message_size > MAX_PAYLOAD_BYTES:
        logger.error(
            f"Invalid message limits: max_message_size {config.max_message_size} "
            f"exceeds the {MAX_PAYLOAD_BYTES} byte Meshtastic payload"
        )
        return 1

    # Cut the text up front so bad limits are reported before touching the radio
    try:
        fragments = formatter_from_config(config).format(text)
    except ConfigurationError as e:
        logger.error(f"Invalid message limits: {e}")
        return 1

    if args.dry_run:
        for fragment in fragments:
            print(fragment)
        return 0

    # Create components
    try:
        transport = MeshtasticTransport(
            connection_type=config.connection_type,
            device=config.device,
        )
        relay = MessageRelay(transport, config, sink=print_incoming)
    except Exception as e:
        logger.error(f"Failed to initialize relay: {e}")
        return 1

    # Set up signal handlers for graceful shutdown
    def signal_handler(sig, frame):
        logger.info("Shutdown signal received")
        relay.stop()
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    logger.info(f"  Connection: {config.connection_type}" + (f" ({config.device})" if config.device else ""))
    logger.info(f"  Max message size: {config.max_message_size} bytes, mode: {config.mode}")

    try:
        relay.start()
        failed = relay.send_fragments(fragments)

        if args.listen:
            logger.info("Listening. Press Ctrl+C to stop.")
            signal.pause()

    except Exception as e:
        logger.error(f"Relay error: {e}")
        return 1
    finally:
        relay.stop()

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
