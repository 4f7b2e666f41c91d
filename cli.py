# cli.py
import os
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.pystore import StoreClient, DEFAULT_API_KEY, DEFAULT_BASE_URL
import requests

console = Console()
c = StoreClient(
    base_url=os.getenv("PRODUCT_API_URL", DEFAULT_BASE_URL),
    api_key=os.getenv("API_KEY", DEFAULT_API_KEY),
)

# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "📦 Products Catalog"):
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
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=30)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("In stock", justify="center", width=8)

    for p in products:
        in_stock = p.get("inStock")
        table.add_row(
            p.get("id", "N/A"),
            p.get("name", "N/A"),
            p.get("description", ""),
            f"{p.get('price', 0):.2f}",
            p.get("category", "N/A"),
            "-" if in_stock is None else ("[green]yes[/green]" if in_stock else "[red]no[/red]"),
        )
    console.print(table)


def show_page(page: Dict[str, Any]):
    title = f"📦 Products - page {page.get('page')} (limit {page.get('limit')}, total {page.get('total')})"
    show_products(page.get("products", []), title=title)


def show_stats(stats: Dict[str, int]):
    if not stats:
        console.print("[italic yellow]No products yet[/italic yellow]")
        return
    table = Table(title="📊 Products per category", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Category", width=20)
    table.add_column("Count", justify="right", width=8)
    for category, count in stats.items():
        table.add_row(category, str(count))
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper with exception handling
# ---------------------------
def _error_text(e: Exception) -> str:
    if isinstance(e, requests.exceptions.HTTPError) and e.response is not None:
        body = e.response.text.strip()
        return f"HTTP {e.response.status_code}: {body}" if body else f"HTTP {e.response.status_code}"
    return str(e)


def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after printing the error.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except requests.exceptions.RequestException as e:
        status_message = f"Error: {_error_text(e)}"
        console.print(show_status(status_message, False))
        return None


# ---------------------------
# Autocompletion helpers
# ---------------------------
def refresh_product_cache():
    global product_cache
    page = try_api(c.list_products, limit=1000)
    product_cache = page["products"] if page else []


def get_product_completer():
    if not product_cache:
        refresh_product_cache()
    names = [p.get("name", "") for p in product_cache]
    ids = [p.get("id", "") for p in product_cache]
    return WordCompleter([n for n in (ids + names) if n], ignore_case=True)


def get_category_completer():
    if not product_cache:
        refresh_product_cache()
    return WordCompleter(sorted({p.get("category", "") for p in product_cache if p.get("category")}), ignore_case=True)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product API",
        "[bold blue]Catalog console with autocomplete[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields(current: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    current = current or {}
    return {
        "name": prompt_with_autocomplete("Name", default=current.get("name", "")),
        "description": prompt_with_autocomplete("Description", default=current.get("description", "")),
        "price": ask_float("💰 Price", default=current.get("price", 10.0)),
        "category": prompt_with_autocomplete("🏷️ Category", completer=get_category_completer(),
                                             default=current.get("category", "")),
        "in_stock": Confirm.ask("In stock?", default=current.get("inStock", True)),
    }


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())
    refresh_product_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, not status_message.startswith("Error")))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "➕ Create product"),
            ("2", "🔍 Search products", "6", "✏️ Update product"),
            ("3", "ℹ️ Get product by ID", "7", "🗑️ Delete product"),
            ("4", "📊 Category stats", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            category = prompt_with_autocomplete("Category (blank for all)", completer=get_category_completer()).strip()
            page = IntPrompt.ask("Page", default=1)
            limit = IntPrompt.ask("Page size", default=10)
            resp = try_api(c.list_products, category or None, page, limit, success_msg="Products loaded")
            if resp is not None:
                show_page(resp)

        elif choice == "2":
            term = prompt_with_autocomplete("Search name")
            res = try_api(c.search_products, term, success_msg=f"Search for '{term}' completed")
            if res is not None:
                show_products(res, title=f"🔍 Results for '{term}'")

        elif choice == "3":
            pid = prompt_with_autocomplete("Product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} loaded")
            if resp:
                show_products([resp])

        elif choice == "4":
            resp = try_api(c.stats, success_msg="Stats loaded")
            if resp is not None:
                show_stats(resp)

        elif choice == "5":
            fields = ask_product_fields()
            resp = try_api(c.create_product, success_msg=f"Product '{fields['name']}' created", **fields)
            if resp:
                console.print(Panel(f"Created product: [green]{resp['id']}[/green]"))
                refresh_product_cache()

        elif choice == "6":
            pid = prompt_with_autocomplete("Product ID", completer=get_product_completer())
            current = try_api(c.get_product, pid)
            if current:
                fields = ask_product_fields(current)
                resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields)
                if resp:
                    show_products([resp])
                    refresh_product_cache()

        elif choice == "7":
            pid = prompt_with_autocomplete("Product ID", completer=get_product_completer())
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                refresh_product_cache()

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
