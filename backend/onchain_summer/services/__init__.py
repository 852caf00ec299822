from onchain_summer.services.drops import DropSelection, select_drops

__all__ = ["DropSelection", "select_drops"]
