# spendlite/outputs/__init__.py
from importlib import import_module


def get_output(name, config):
    outputs = config['output_modules']
    if name not in outputs:
        raise ValueError(f"Unknown output '{name}'. Known: {sorted(outputs)}")
    module_name, cls_name = outputs[name].rsplit('.', 1)
    mod = import_module(module_name)
    return getattr(mod, cls_name)(config)
