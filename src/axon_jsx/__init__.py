"""Reactive JSX attribute transform for the axon runtime."""

# Analysis
from axon_jsx.analysis import contains_call as contains_call
from axon_jsx.analysis import should_skip as should_skip

# Code generation
from axon_jsx.codegen import GeneratedCode as GeneratedCode
from axon_jsx.codegen import generate as generate

# Config
from axon_jsx.config import PluginConfig as PluginConfig

# Errors
from axon_jsx.errors import AxonError as AxonError
from axon_jsx.errors import ParseError as ParseError
from axon_jsx.errors import UnexpectedNodeError as UnexpectedNodeError

# Nodes
from axon_jsx.nodes import Array as Array
from axon_jsx.nodes import ArrowFunction as ArrowFunction
from axon_jsx.nodes import Binary as Binary
from axon_jsx.nodes import Call as Call
from axon_jsx.nodes import Conditional as Conditional
from axon_jsx.nodes import Expr as Expr
from axon_jsx.nodes import Function as Function
from axon_jsx.nodes import JSXAttribute as JSXAttribute
from axon_jsx.nodes import JSXElementValue as JSXElementValue
from axon_jsx.nodes import JSXEmptyExpression as JSXEmptyExpression
from axon_jsx.nodes import JSXExpressionContainer as JSXExpressionContainer
from axon_jsx.nodes import JSXName as JSXName
from axon_jsx.nodes import JSXNamespacedName as JSXNamespacedName
from axon_jsx.nodes import Logical as Logical
from axon_jsx.nodes import Member as Member
from axon_jsx.nodes import Module as Module
from axon_jsx.nodes import Object as Object
from axon_jsx.nodes import Opaque as Opaque
from axon_jsx.nodes import Property as Property
from axon_jsx.nodes import StringLiteral as StringLiteral
from axon_jsx.nodes import TemplateLiteral as TemplateLiteral
from axon_jsx.nodes import Unary as Unary
from axon_jsx.nodes import attribute_name as attribute_name
from axon_jsx.nodes import walk_attributes as walk_attributes

# Parsing
from axon_jsx.parser import parse as parse
from axon_jsx.parser import parse_expression as parse_expression

# Plugin
from axon_jsx.plugin import AxonPlugin as AxonPlugin
from axon_jsx.plugin import axon_plugin as axon_plugin

# Rewrite
from axon_jsx.rewrite import RewriteStats as RewriteStats
from axon_jsx.rewrite import rewrite_attributes as rewrite_attributes
from axon_jsx.rewrite import rewrite_attributes_with_stats as rewrite_attributes_with_stats

# Source maps
from axon_jsx.sourcemap import SourceMap as SourceMap

# Transform
from axon_jsx.transform import TransformResult as TransformResult
from axon_jsx.transform import transform as transform
