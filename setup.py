# Copyright 2014 Google Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import io
import os

from setuptools import find_packages
from setuptools import setup


DEPENDENCIES = ("cryptography >= 38.0.3",)

extras = {
    "testing": ["pytest", "pytest-cov"],
}

package_root = os.path.abspath(os.path.dirname(__file__))

version = {}
with io.open(os.path.join(package_root, "tokensign", "__init__.py")) as fp:
    for line in fp:
        if line.startswith("__version__"):
            exec(line, version)

setup(
    name="tokensign",
    version=version["__version__"],
    description="RSASSA-PSS signers for token signing frameworks",
    url="https://github.com/googleapis/google-auth-library-python",
    packages=find_packages(exclude=("tests*", "system_tests*", "docs*", "samples*")),
    install_requires=DEPENDENCIES,
    extras_require=extras,
    python_requires=">=3.8",
    license="Apache 2.0",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
    ],
)
