from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

ORDERS_CONTROLLER = """class Cms::Emr::OrdersController < ApplicationController
  before_action :load_order, only: [:show]

  def index
    @orders = Order.all
    if params[:pending]
      @orders = @orders.pending
    end
  end

  def list
    @orders = Order.recent
  end

  def show
  end

  private

  def load_order
    @order = Order.find(params[:id])
  end
end
"""


@pytest.fixture
def orders_controller_source() -> str:
    return ORDERS_CONTROLLER


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[..., Path]:
    def _write(relative: str, content: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
