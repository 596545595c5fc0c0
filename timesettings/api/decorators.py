# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

import functools
from dataclasses import is_dataclass, asdict
from typing import List, Callable, Any, Dict, get_type_hints, Optional, get_origin, get_args

from pydbus import Variant

from timesettings.errors.codes import ErrorCode
from timesettings.errors.errors import DBusMappingException, TimeSettingsException
from timesettings.errors.warnings import TimeSettingsWarning


def dbus_api(cls):
    records: List[str] = []
    for var in vars(cls):
        obj = getattr(cls, var)
        if isinstance(obj, property):
            obj = obj.fget
        if hasattr(obj, "__dbus__"):
            record = obj.__dbus__
            assert isinstance(record, str)
            records.append(record)
    cls.dbus = f"<node><interface name='{cls.__INTERFACE__}'>{''.join(records)}</interface></node>"
    return cls


def manual_dbus(dbus: str):
    def decor(func):
        if func.__doc__ is None:
            func.__doc__ = ""
        func.__doc__ += "\nD-Bus interface:: \n\n\t" + "\n\t".join(dbus.splitlines())
        if isinstance(func, property):
            func.fget.__dbus__ = dbus
        else:
            func.__dbus__ = dbus
        return func

    return decor


def auto_dbus(func):
    try:
        if isinstance(func, property):
            name = func.fget.__name__
        else:
            name = func.__name__
    except Exception as e:
        raise DBusMappingException(f"Failed to obtain name for {func}") from e

    dbus = gen_method_dbus_spec(func, name)
    return manual_dbus(dbus)(func)


PYTHON_TO_DBUS_TYPE = {
    int: "i",
    float: "d",
    bool: "b",
    str: "s",
    Any: "v",
}


def python_to_dbus_type(python_type: Any) -> str:
    if python_type in PYTHON_TO_DBUS_TYPE:
        return PYTHON_TO_DBUS_TYPE[python_type]

    origin = get_origin(python_type)
    args = get_args(python_type)
    if origin is dict:
        return "a{" + python_to_dbus_type(args[0]) + python_to_dbus_type(args[1]) + "}"

    if origin is list:
        return "a" + python_to_dbus_type(args[0])

    if origin is tuple:
        return "(" + "".join(python_to_dbus_type(arg) for arg in args) + ")"

    raise ValueError(f"Type: {python_type} has no defined mapping to dbus")


def gen_method_dbus_spec(obj: Any, name: str) -> str:
    try:
        if isinstance(obj, property):
            access = "read"
            get_type = python_to_dbus_type(get_type_hints(obj.fget)["return"])
            if obj.fset:
                access = "readwrite"
            return f'<property name="{name}" type="{get_type}" access="{access}"></property>'
        if isinstance(obj, Callable):
            args = []
            for n, t in get_type_hints(obj).items():
                if t == type(None):
                    continue
                direction = "out" if n == "return" else "in"
                args.append(f"<arg type='{python_to_dbus_type(t)}' name='{n}' direction='{direction}'/>")
            return f"<method name='{name}'>{''.join(args)}</method>"
        raise ValueError(f"Unsupported dbus mapping type: {type(obj)}")
    except Exception as exception:
        raise DBusMappingException(f"Failed to generate dbus specification for {name}") from exception


def python_to_dbus_value_type(data: Any):
    # pylint: disable = unidiomatic-typecheck
    if type(data) in PYTHON_TO_DBUS_TYPE:
        return PYTHON_TO_DBUS_TYPE[type(data)]

    if isinstance(data, list):
        dbus_type = "v"
        if data:
            child_types = {python_to_dbus_value_type(child) for child in data}
            if len(child_types) == 1:
                dbus_type = child_types.pop()
        return f"a{dbus_type}"

    raise DBusMappingException(f"Failed to get value {data} dbus type")


def wrap_value(data: Any) -> Variant:
    # pylint: disable = unidiomatic-typecheck
    if type(data) in PYTHON_TO_DBUS_TYPE:
        return Variant(PYTHON_TO_DBUS_TYPE[type(data)], data)

    if isinstance(data, dict):
        return Variant("a{sv}", {str(key): wrap_value(val) for key, val in data.items()})

    if isinstance(data, list):
        dbus_type = python_to_dbus_value_type(data)
        if dbus_type[1] == "v":
            return Variant(dbus_type, [wrap_value(d) for d in data])
        return Variant(dbus_type, data)

    if data is None:
        return Variant("s", "")

    raise DBusMappingException(f"Failed to wrap dbus value {data}")


def wrap_dict_data(data: Dict[str, Any]):
    if isinstance(data, Dict):
        return {key: wrap_value(val) for key, val in data.items()}
    return wrap_value(data)


LAST_EXCEPTION_ATTR = "_last_exception"


def last_error(method):
    @functools.wraps(method)
    def wrap(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except Exception as e:
            assert hasattr(self, LAST_EXCEPTION_ATTR)
            setattr(self, LAST_EXCEPTION_ATTR, e)
            raise e

    return wrap


def wrap_exception(e: Optional[Exception]) -> Dict[str, Any]:
    """
    Wrap exception in dictionary

    Exception is represented as dictionary str -> variant
    {
        "code": error code
        "code_specific_feature1": value1
        "code_specific_feature2": value2
        ...
    }

    :return: Exception dictionary
    """
    if not e:
        return {"code": ErrorCode.NONE.code}

    if isinstance(e, TimeSettingsException):
        ret = {"code": e.CODE.code, "name": type(e).__name__, "text": str(e)}
        if is_dataclass(e):
            ret.update(asdict(e))
        return ret

    return {"code": ErrorCode.UNKNOWN.code, "name": type(e).__name__, "text": str(e)}


def wrap_warning(warning: Optional[Warning]) -> Dict[str, Any]:
    """
    Wrap warning in dictionary

    Warning is represented as dictionary str -> variant
    {
        "code": warning code
        "code_specific_feature1": value1
        "code_specific_feature2": value2
        ...
    }

    :param warning: Warning to wrap
    :return: Warning dictionary
    """
    if not warning:
        return {"code": ErrorCode.NONE_WARNING.code}

    if isinstance(warning, TimeSettingsWarning):
        ret = {"code": warning.CODE.code, "name": type(warning).__name__, "text": warning.MESSAGE}
        if is_dataclass(warning):
            ret.update(asdict(warning))
        return ret

    return {"code": ErrorCode.UNKNOWN_WARNING.code, "name": type(warning).__name__, "text": str(warning)}
