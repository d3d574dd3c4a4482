from rich.console import Console

# soft_wrap: long paths stay on one line when output is piped
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)
