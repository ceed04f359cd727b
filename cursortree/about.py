__title__ = "cursortree"
__version__ = "0.1.0"
__summary__ = "Cursortree - a binary tree editor driven by a movable cursor"
__uri__ = "https://github.com/cursortree/cursortree"
__author__ = "Cursortree Developers"
__email__ = "dev@cursortree.org"
__license__ = "MIT"
