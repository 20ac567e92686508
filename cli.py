# cli.py - interactive storefront browser
import sys
from datetime import datetime
from typing import List, Dict, Any

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.text import Text
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.storeclient import StoreClient, format_price

console = Console()
c = StoreClient()

status_message = "Ready"
product_cache: List[Dict[str, Any]] = []
category_cache: List[str] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#8a6d3b #ffffff',
    'completion-menu.completion.current': 'bg:#c9a227 #000000',
    'scrollbar.background': 'bg:#d8c690',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "💍 Jewellery Catalog"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=5)
    table.add_column("Name", style="bold", width=28)
    table.add_column("Price", justify="right", width=14)
    table.add_column("Stock", justify="right", width=6)
    table.add_column("Category", width=12)

    for p in products:
        stock = p.get("stock")
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name", "N/A"),
            format_price(p.get("price", 0)),
            "-" if stock is None else str(stock),
            p.get("category", "N/A")
        )
    console.print(table)


def show_product_detail(product: Dict[str, Any]):
    body = Text()
    body.append(f"{format_price(product.get('price', 0))}\n", style="bold green")
    body.append(f"Category: {product.get('category', 'N/A')}\n")
    if product.get("stock") is not None:
        body.append(f"In stock: {product['stock']}\n")
    if product.get("description"):
        body.append(f"\n{product['description']}\n", style="italic")
    body.append(f"\n{product.get('image', '')}", style="dim")
    console.print(Panel(body, title=f"#{product.get('id')} {product.get('name', '')}", border_style="magenta"))


def show_categories(categories: List[str]):
    if not categories:
        console.print("[italic yellow]No categories found[/italic yellow]")
        return
    table = Table(title="🏷️ Categories", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("#", justify="right", width=4)
    table.add_column("Category", width=24)
    for i, name in enumerate(categories, 1):
        table.add_row(str(i), name)
    console.print(table)


def show_cart(resp: Dict[str, Any]):
    cart = resp.get("cart") or {}
    items = cart.get("items", [])
    title = Text()
    title.append("🛒 Cart - Total: ", style="bold")
    title.append(format_price(cart.get("total", 0)), style="bold green")

    table = Table(box=box.ROUNDED, header_style="bold blue", show_lines=True)
    table.add_column("Product", style="bold", width=28)
    table.add_column("Qty", justify="right", width=6)
    table.add_column("Price", justify="right", width=14)
    table.add_column("Subtotal", justify="right", width=14)
    for it in items:
        table.add_row(
            it.get("name", "Unknown"),
            str(it.get("quantity", 0)),
            format_price(it.get("price", 0)),
            format_price(it.get("lineTotal", 0))
        )
    console.print(Panel(table, title=title, border_style="blue"))


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


def report(resp: Dict[str, Any]) -> bool:
    """Print the outcome of a write call and return whether it succeeded."""
    global status_message
    ok = bool(resp.get("success"))
    status_message = resp.get("message") if ok else f"Error: {resp.get('error', 'unknown error')}"
    console.print(show_status(status_message, ok))
    return ok


# ---------------------------
# API wrapper
# ---------------------------
def with_spinner(fn, *args, **kwargs):
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        transient=True,
    ) as progress:
        progress.add_task(description="Loading...", total=None)
        return fn(*args, **kwargs)


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    global product_cache
    if not product_cache:
        product_cache = with_spinner(c.list_products)
    return WordCompleter([str(p.get("id")) for p in product_cache if p.get("id") is not None])


def get_category_completer():
    global category_cache
    if not category_cache:
        category_cache = with_spinner(c.list_categories)
    return WordCompleter(category_cache)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "💎 Jewel Storefront",
        f"[bold blue]{c.base_url}[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, product_cache, category_cache

    console.clear()
    console.print(create_header())

    product_cache = with_spinner(c.list_products)
    category_cache = with_spinner(c.list_categories)
    if not product_cache:
        status_message = "Catalog is empty or the API is unreachable"

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "🛒 Add to cart"),
            ("2", "🔍 Browse a category", "6", "📰 Subscribe to newsletter"),
            ("3", "ℹ️ Product details", "7", "✉️ Contact us"),
            ("4", "🏷️ List categories", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            product_cache = with_spinner(c.list_products)
            status_message = f"{len(product_cache)} products loaded"
            show_products(product_cache)

        elif choice == "2":
            category = prompt_with_autocomplete("Category", completer=get_category_completer()).strip()
            products = with_spinner(c.list_products, category or None)
            status_message = f"{len(products)} products in '{category}'" if category else f"{len(products)} products loaded"
            show_products(products, title=f"💍 {category or 'All products'}")

        elif choice == "3":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
            product = with_spinner(c.get_product, pid)
            if product is None:
                status_message = f"Error: product {pid} not found"
            else:
                status_message = f"Product {pid} loaded"
                show_product_detail(product)

        elif choice == "4":
            category_cache = with_spinner(c.list_categories)
            status_message = f"{len(category_cache)} categories"
            show_categories(category_cache)

        elif choice == "5":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
            qty = IntPrompt.ask("Enter quantity", default=1)
            resp = with_spinner(c.add_to_cart, pid, qty)
            if report(resp):
                show_cart(resp)

        elif choice == "6":
            email = prompt_with_autocomplete("Your email").strip()
            report(with_spinner(c.subscribe, email))

        elif choice == "7":
            name = prompt_with_autocomplete("Your name").strip()
            email = prompt_with_autocomplete("Your email").strip()
            message = prompt_with_autocomplete("Message").strip()
            report(with_spinner(c.contact, name, email, message))

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Thank you for visiting! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
