# spendlite/loaders/__init__.py
from importlib import import_module


def get_loader(name, config):
    loaders = config['bank_loaders']
    if name not in loaders:
        raise ValueError(f"Unknown loader '{name}'. Known: {sorted(loaders)}")
    module_name, cls_name = loaders[name].rsplit('.', 1)
    mod = import_module(module_name)
    return getattr(mod, cls_name)()
