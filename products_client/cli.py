import argparse
import asyncio
import json
import os
import sys
from typing import List, Optional

from products_client.config import Config
from products_client.exceptions import ProductsApiError
from products_client.logger import setup_logger
from products_client.models.product import ProductQueryParams
from products_client.services.product_service import ProductService
from products_client.services.transport import Transport


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="products-client", description="Call the products API.")
    parser.add_argument("--base-url", help="API base URL (defaults to API_BASE_URL)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests at DEBUG level")

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List products")
    list_parser.add_argument("--page", type=int)
    list_parser.add_argument("--limit", type=int)
    list_parser.add_argument("--search")
    list_parser.add_argument("--manufacturer")
    list_parser.add_argument("--sort-by")
    list_parser.add_argument("--sort-order", choices=["asc", "desc"])

    get_parser = subparsers.add_parser("get", help="Fetch one product")
    get_parser.add_argument("product_id")

    create_parser = subparsers.add_parser("create", help="Create a product from a JSON object")
    create_parser.add_argument("data", type=json.loads)

    update_parser = subparsers.add_parser("update", help="Update a product from a JSON object")
    update_parser.add_argument("product_id")
    update_parser.add_argument("data", type=json.loads)

    delete_parser = subparsers.add_parser("delete", help="Delete a product")
    delete_parser.add_argument("product_id")

    return parser


async def run_command(args: argparse.Namespace, product_service: ProductService):
    """Dispatch parsed arguments to the matching ProductService call."""
    if args.command == "list":
        params = ProductQueryParams(page=args.page, limit=args.limit, search=args.search,
                                    manufacturer=args.manufacturer, sort_by=args.sort_by,
                                    sort_order=args.sort_order)
        return (await product_service.fetch_products(params)).to_dict()
    if args.command == "get":
        return await product_service.fetch_product(args.product_id)
    if args.command == "create":
        return await product_service.create_product(args.data)
    if args.command == "update":
        return await product_service.update_product(args.product_id, args.data)
    await product_service.delete_product(args.product_id)
    return None


def main(argv: Optional[List[str]] = None, transport: Optional[Transport] = None) -> int:
    """Main function to run the products client from the command line."""
    args = build_parser().parse_args(argv)

    setup_logger("DEBUG" if args.verbose else os.getenv("LOG_LEVEL", "INFO"))
    try:
        config = Config(api_base_url=args.base_url, request_timeout=args.timeout)
    except (EnvironmentError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    product_service = ProductService(config, transport=transport)

    try:
        result = asyncio.run(run_command(args, product_service))
    except ProductsApiError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if result is not None:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
