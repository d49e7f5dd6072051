"""
CLI入口
使用 typer 和 rich 校验DHCP配置并展示接口描述符
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config.settings import AppSettings
from .core.errors import DHCPConfigError, JoinedConfigError
from .core.iprange import AddressRange, as_address
from .core.types import ProtocolFamily
from .loader import load_config
from .service import ServiceAssembler, ServiceState
from .utils.logging import configure_logging, get_logger

# 创建应用和控制台
app = typer.Typer(
    name="dhcp-topo",
    help="DHCP服务拓扑校验工具",
    add_completion=False,
    rich_markup_mode="rich"
)
console = Console()

logger = get_logger(__name__)

app_settings = AppSettings()


# 回调函数
def version_callback(value: bool):
    """版本回调"""
    if value:
        console.print(f"dhcp-topo v{__version__}")
        raise typer.Exit()


# 全局选项
@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="显示版本信息"
    ),
    verbose: bool = typer.Option(
        False, "--verbose",
        help="详细输出"
    ),
    json_logs: bool = typer.Option(
        False, "--json-logs",
        help="以JSON格式输出日志"
    ),
):
    """DHCP服务拓扑校验工具"""
    global app_settings
    app_settings = AppSettings()

    configure_logging(
        verbose or app_settings.verbose,
        json_logs or app_settings.json_logs,
    )
    logger.info("cli_started", verbose=verbose)


# 显示函数
def display_error(err: DHCPConfigError):
    """显示配置错误"""
    console.print("[red]配置验证失败:[/red]")
    errors = err.errors if isinstance(err, JoinedConfigError) else [err]
    for error in errors:
        console.print(f"  • {error}", markup=False, soft_wrap=True)


def display_interfaces4(state: ServiceState):
    """显示IPv4接口"""
    table = Table(title=ProtocolFamily.IPV4.description)
    table.add_column("接口", style="cyan")
    table.add_column("网关", style="green")
    table.add_column("子网")
    table.add_column("地址范围")
    table.add_column("地址数", justify="right")
    table.add_column("租约")

    for iface in state.interfaces4:
        table.add_row(
            iface.name,
            str(iface.gateway),
            str(iface.subnet),
            str(iface.address_space),
            str(iface.address_count),
            str(iface.lease_ttl),
        )
    console.print(table)


def display_interfaces6(state: ServiceState):
    """显示IPv6接口"""
    table = Table(title=ProtocolFamily.IPV6.description)
    table.add_column("接口", style="cyan")
    table.add_column("范围起点", style="green")
    table.add_column("租约")
    table.add_column("允许SLAAC")
    table.add_column("仅SLAAC")

    for iface in state.interfaces6:
        table.add_row(
            iface.name,
            str(iface.range_start) if iface.range_start is not None else "-",
            str(iface.lease_ttl),
            "是" if iface.ra_allow_slaac else "否",
            "是" if iface.ra_slaac_only else "否",
        )
    console.print(table)


def display_summary(summary: dict):
    """显示统计信息"""
    panel = Panel(
        f"""
[bold]服务统计[/bold]

• 接口数: {summary['interfaces']}
• IPv4 接口: {summary['interfaces4']}
• IPv6 接口: {summary['interfaces6']}
• 可分配IPv4地址: {summary['allocatable4']}
        """.strip(),
        title="DHCP服务",
        border_style="blue"
    )
    console.print(panel)


@app.command("check")
def check_command(
    config_file: Optional[Path] = typer.Argument(None, help="配置文件 (YAML/JSON)，默认读取 DHCP_TOPO_CONFIG_FILE"),
):
    """校验配置文件并展示装配结果

    Examples:
      check dhcp.yaml
    """
    path = config_file or app_settings.config_file
    if path is None:
        console.print("[red]未指定配置文件[/red]")
        raise typer.Exit(2)

    assembler = ServiceAssembler()
    try:
        config = load_config(path)
        state = assembler.assemble(config)
    except DHCPConfigError as e:
        display_error(e)
        logger.error("check_failed", path=str(path), error=str(e))
        raise typer.Exit(1)

    if state is None:
        console.print("[yellow]DHCP服务未启用[/yellow]")
        return

    display_interfaces4(state)
    display_interfaces6(state)
    display_summary(assembler.summarize(state))
    console.print("[green]配置验证通过 ✓[/green]")


@app.command("range")
def range_command(
    start: str = typer.Argument(..., help="起始地址"),
    end: str = typer.Argument(..., help="结束地址"),
    taken: List[str] = typer.Option([], "--taken", "-t", help="已占用的地址，可多次传入"),
):
    """检查地址范围，并查找第一个未占用的地址"""
    try:
        address_range = AddressRange(start, end)
        taken_addresses = {as_address(addr) for addr in taken}
    except DHCPConfigError as e:
        display_error(e)
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]无效地址: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"范围: {address_range}")
    console.print(f"地址数: {len(address_range)}")

    free = address_range.find(lambda addr: addr not in taken_addresses)
    if free is None:
        console.print("[yellow]没有可用地址[/yellow]")
        raise typer.Exit(1)

    offset, _ = address_range.offset(free)
    console.print(f"第一个可用地址: {free} (偏移 {offset})")


# 主入口
if __name__ == "__main__":
    app()
