# -*- coding: utf-8 -*-
from setuptools import setup

packages = \
['script_recognizer']

package_data = \
{'': ['*']}

install_requires = \
['babel>=2.12', 'cachetools', 'pydantic>=2']

extras_require = \
{'test': ['pytest']}

entry_points = \
{'fuo.plugins_v1': ['script_recognizer = script_recognizer']}

setup_kwargs = {
    'name': 'script-recognizer',
    'version': '0.1.0',
    'description': 'Script-aware locale resolving for Babel',
    'long_description': "# script-recognizer\n\nBabel only understands `language` or `language_REGION`. A locale such as\n`zh_Hant` (Chinese, Traditional script, no region) falls back to `zh`, which\nformats dates with simplified characters (`周三` instead of `週三`).\n\n`script-recognizer` keeps a small table from (language, script) to a region\nand fills the region in before the locale reaches Babel.\n\n```python\nfrom script_recognizer import StructuredLocale, get_recognizer\n\nget_recognizer().resolve(StructuredLocale(language='zh', script='Hant'))  # 'zh_TW'\n```\n\n## FeelUOwn plugin\n\n```python\n# In ~/.fuorc\nconfig.script_recognizer.SCRIPT_REGIONS = {'zh_Hans': 'SG'}\n```\n",
    'author': None,
    'author_email': None,
    'maintainer': None,
    'maintainer_email': None,
    'url': None,
    'packages': packages,
    'package_data': package_data,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'entry_points': entry_points,
    'python_requires': '>=3.8,<4.0',
}


setup(**setup_kwargs)
