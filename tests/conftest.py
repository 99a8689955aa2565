"""Shared fixtures: a C# class with every member shape the scanner handles."""

from __future__ import annotations

import pytest

from csharp_scanner.core.models import CursorPosition, Editor, SourceText


SAMPLE_CLASS = """using System;
using System.Collections.Generic;
using System.Linq;
using System.Threading.Tasks;

namespace Sample
{
    public class MyClass<TType> : BaseClass, IMyClass, IMyTypedClass<string> where TType : class
    {
        private string _fullProperty;
        public int MyProperty { get; set; }
        public int MyPropertyLamda => 5;
        public string FullProperty
        {
            get => _fullProperty;
            set => _fullProperty = value;
        }
        public string FullPropertyAlt
        {
            get
            {
                return _fullProperty + "}";
            }
            set
            {
                _fullProperty = value;
            }
        }
        public Task<int> GetNewIdAsync<TNewType>(string name,
            string address,
            string city,
            string state) where TNewType : TType
        {
            var id = name.Length;
            if (id > 0)
            {
                id++;
            }
            return Task.FromResult(id);
        }
    }
}
"""

# line numbers in SAMPLE_CLASS
CLASS_LINE = 7
AUTO_PROPERTY_LINE = 10
LAMBDA_PROPERTY_LINE = 11
FULL_PROPERTY_LINE = 12
INSIDE_FULL_PROPERTY = 14
FULL_PROPERTY_ALT_LINE = 17
INSIDE_FULL_PROPERTY_ALT = 21
METHOD_LINE = 28
INSIDE_METHOD_BODY = 37


@pytest.fixture
def sample_source() -> SourceText:
    return SourceText.from_text(SAMPLE_CLASS)


@pytest.fixture
def editor_at(sample_source):
    """Factory: an editor over SAMPLE_CLASS with the cursor on `line`."""

    def _make(line: int) -> Editor:
        return Editor(document=sample_source, cursor=CursorPosition(line=line))

    return _make
