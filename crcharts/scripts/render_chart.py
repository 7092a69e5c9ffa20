#!/usr/bin/env python3
"""
Chart Rendering Script

Draws one chart from a YAML definition into a standalone HTML page.
"""

import argparse
import sys
from pathlib import Path

from crcharts.dom import Document
from crcharts.exceptions import ChartError, ConfigError
from crcharts.utils.config_loader import ConfigLoader
from crcharts.utils.logger import setup_logger
from crcharts.visualization.builder import Chart
from crcharts.visualization.settings import ChartDefaults

STYLESHEET = """
body { font-family: sans-serif; font-size: 12px; }
.chart-wrapper { position: relative; }
.chart { position: relative; }
.column-group a.column { position: absolute; display: block; }
.axis path, .axis line { fill: none; stroke: #ccc; shape-rendering: crispEdges; }
.pie-chart .arc { stroke: #fff; }
.pie-chart .arc.hovered, .pie-chart .legend-item.hovered { opacity: .7; }
.center-group .label-value { font-size: 18px; font-weight: bold; }
""".strip()


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a chart definition to an HTML file"
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config/chart_config.yaml',
        help='Path to chart definition file'
    )
    parser.add_argument(
        '--output',
        type=str,
        default='chart.html',
        help='Output HTML file'
    )
    parser.add_argument(
        '--width',
        type=int,
        default=600,
        help='Container width in px'
    )
    parser.add_argument(
        '--parent-height',
        type=int,
        default=None,
        help='Height of the element holding the chart container, in px'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Verbose output'
    )
    return parser.parse_args(argv)


def render(config_path, output_path, width=600, parent_height=None) -> Path:
    """
    Draw the chart defined in ``config_path`` and write it as HTML.

    Returns
    -------
    Path
        The written file
    """
    loader = ConfigLoader(config_path)
    options = loader.get('chart') or {}
    if not isinstance(options, dict):
        raise ConfigError(f"'chart' section of {config_path} must be a mapping")
    defaults = ChartDefaults.from_dict(loader.get('defaults', {}))

    page = Document()
    wrapper_style = {'width': f"{width}px"}
    if parent_height is not None:
        wrapper_style['height'] = f"{parent_height}px"
    wrapper = page.create_element('div', id='chart-wrapper', style=wrapper_style)
    wrapper.classed('chart-wrapper')
    container = page.create_element('div', id='chart', parent=wrapper)
    container.classed('chart')

    Chart({**options, 'container': 'chart'}, document=page, defaults=defaults)

    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(page.to_html(title=options.get('title', 'Chart'), stylesheet=STYLESHEET))
    return output_file


def main(argv=None):
    """Main execution function."""
    args = parse_args(argv)

    logger = setup_logger(name='crcharts', level='DEBUG' if args.verbose else 'INFO')
    logger.info(f"Rendering {args.config}...")

    try:
        output_file = render(args.config, args.output, args.width, args.parent_height)
    except (ChartError, FileNotFoundError) as e:
        logger.error(f"Could not render {args.config}: {e}", exc_info=True)
        return 1

    logger.info(f"Saved chart to {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
