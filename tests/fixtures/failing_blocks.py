"""A definition whose define function fails partway through."""


def define(builder):
    builder.add_module("Hero Banner", "layout")
    raise KeyError("missing theme setting")
