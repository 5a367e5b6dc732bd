"""Каталог токенов: постраничная выдача и TVL."""
